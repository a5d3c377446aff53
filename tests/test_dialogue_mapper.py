from __future__ import annotations

import json
from datetime import datetime

import pytest

from bookclub.domain.entities.dialogue import PollingState, StartState
from bookclub.domain.exceptions import DialogueStateDecodeError
from bookclub.infrastructure.db.mappers.dialogue_mapper import decode_dialogue_state, encode_dialogue_state


def test_polling_state_is_tagged_and_versioned():
    state = PollingState(
        start=datetime(2024, 1, 1),
        end=datetime(2024, 1, 4),
        selected=frozenset({"2024-01-03", "2024-01-01"}),
    )

    raw = encode_dialogue_state(state)

    assert json.loads(raw) == {
        "schema": 1,
        "state": {
            "type": "polling",
            "start": "2024-01-01T00:00:00",
            "end": "2024-01-04T00:00:00",
            "selected": ["2024-01-01", "2024-01-03"],
        },
    }
    assert decode_dialogue_state(raw) == state


def test_start_state_decodes():
    assert decode_dialogue_state('{"schema": 1, "state": {"type": "start"}}') == StartState()


@pytest.mark.parametrize(
    "raw",
    [
        '{"schema": 2, "state": {"type": "start"}}',
        '{"state": {"type": "start"}}',
        '{"schema": 1, "state": {"type": "voting"}}',
        '{"schema": 1, "state": {"type": "polling", "start": "yesterday"}}',
        "not json",
        "[]",
    ],
)
def test_unrecognized_documents_raise(raw: str):
    with pytest.raises(DialogueStateDecodeError):
        decode_dialogue_state(raw)
