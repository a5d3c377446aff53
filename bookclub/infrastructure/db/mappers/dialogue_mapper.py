"""JSON encoding of conversation state.

Stored documents look like::

    {"schema": 1, "state": {"type": "start"}}
    {"schema": 1, "state": {"type": "polling", "start": "...", "end": "...", "selected": [...]}}

Decoding never guesses: an unknown schema version or state type raises
``DialogueStateDecodeError``.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from bookclub.domain.entities.dialogue import DialogueState, PollingState, StartState
from bookclub.domain.exceptions import DialogueStateDecodeError


SCHEMA_VERSION = 1
STATE_START = "start"
STATE_POLLING = "polling"


def encode_dialogue_state(state: DialogueState) -> str:
    if isinstance(state, StartState):
        body: dict[str, Any] = {"type": STATE_START}
    elif isinstance(state, PollingState):
        body = {
            "type": STATE_POLLING,
            "start": state.start.isoformat(),
            "end": state.end.isoformat(),
            "selected": sorted(state.selected),
        }
    else:
        raise TypeError(f"Unsupported dialogue state: {state!r}")
    return json.dumps({"schema": SCHEMA_VERSION, "state": body}, sort_keys=True)


def decode_dialogue_state(raw: str) -> DialogueState:
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise DialogueStateDecodeError("Dialogue state is not valid JSON.") from exc

    if not isinstance(payload, dict):
        raise DialogueStateDecodeError("Dialogue state must be a JSON object.")
    version = payload.get("schema")
    if version != SCHEMA_VERSION:
        raise DialogueStateDecodeError(f"Unsupported dialogue state schema: {version!r}")

    body = payload.get("state")
    if not isinstance(body, dict):
        raise DialogueStateDecodeError("Dialogue state body is missing.")

    kind = body.get("type")
    if kind == STATE_START:
        return StartState()
    if kind == STATE_POLLING:
        try:
            return PollingState(
                start=datetime.fromisoformat(body["start"]),
                end=datetime.fromisoformat(body["end"]),
                selected=frozenset(str(key) for key in body.get("selected", [])),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise DialogueStateDecodeError("Polling state is malformed.") from exc
    raise DialogueStateDecodeError(f"Unknown dialogue state type: {kind!r}")
