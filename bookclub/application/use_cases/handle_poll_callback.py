from __future__ import annotations

import logging

from bookclub.application.dto.dialogue import PollCallbackInput, PollCallbackOutput
from bookclub.application.ports.dialogue_state_port import DialogueStatePort
from bookclub.domain.entities.dialogue import PollingState
from bookclub.domain.services.poll_keyboard import build_poll_keyboard, poll_day_keys, toggle_selected


logger = logging.getLogger(__name__)


class HandlePollCallbackUseCase:
    """Toggle a tapped day in the active poll and return the refreshed keyboard.

    Returns ``keyboard=None`` when there is nothing to re-render: no active
    poll, an empty payload or a key outside the poll range.
    """

    def __init__(self, *, dialogue_state_port: DialogueStatePort):
        self._dialogue_state_port = dialogue_state_port

    def execute(self, command: PollCallbackInput) -> PollCallbackOutput:
        state = self._dialogue_state_port.get_state(conversation_id=command.conversation_id)
        if not isinstance(state, PollingState):
            logger.info(
                "poll_callback: ignored_without_poll conversation_id=%s data=%s",
                command.conversation_id,
                command.data,
            )
            return PollCallbackOutput(keyboard=None)

        key = (command.data or "").strip()
        if key not in poll_day_keys(state.start, state.end):
            logger.warning(
                "poll_callback: key_out_of_range conversation_id=%s data=%s",
                command.conversation_id,
                command.data,
            )
            return PollCallbackOutput(keyboard=None)

        updated = PollingState(
            start=state.start,
            end=state.end,
            selected=toggle_selected(state.selected, key),
        )
        self._dialogue_state_port.save_state(conversation_id=command.conversation_id, state=updated)
        return PollCallbackOutput(
            keyboard=build_poll_keyboard(updated.start, updated.end, updated.selected),
        )
