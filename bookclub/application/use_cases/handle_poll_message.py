from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from bookclub.application.dto.dialogue import OutgoingMessage, PollMessageInput, PollMessageOutput
from bookclub.application.ports.dialogue_state_port import DialogueStatePort
from bookclub.domain.entities.dialogue import PollingState
from bookclub.domain.exceptions import PollCommandParseError
from bookclub.domain.services.poll_commands import (
    EchoCommand,
    HelpCommand,
    PollDateCommand,
    describe_commands,
    parse_command,
)
from bookclub.domain.services.poll_keyboard import build_poll_keyboard


logger = logging.getLogger(__name__)

SELECT_DAYS_PROMPT = "Select Days"


class HandlePollMessageUseCase:
    def __init__(
        self,
        *,
        dialogue_state_port: DialogueStatePort,
        now: Callable[[], datetime] = datetime.now,
    ):
        self._dialogue_state_port = dialogue_state_port
        self._now = now

    def execute(self, command: PollMessageInput) -> PollMessageOutput:
        try:
            parsed = parse_command(command.text, bot_username=command.bot_username, now=self._now())
        except PollCommandParseError as exc:
            logger.info(
                "poll_message: parse_failed conversation_id=%s error=%s",
                command.conversation_id,
                exc,
            )
            return PollMessageOutput(replies=[OutgoingMessage(text=str(exc))])

        if isinstance(parsed, EchoCommand):
            return PollMessageOutput(replies=[OutgoingMessage(text=f"you said '{parsed.text}'")])

        if isinstance(parsed, HelpCommand):
            return PollMessageOutput(replies=[OutgoingMessage(text=describe_commands())])

        if isinstance(parsed, PollDateCommand):
            return self._start_poll(command.conversation_id, parsed)

        raise TypeError(f"Unsupported command: {parsed!r}")

    def _start_poll(self, conversation_id: str, command: PollDateCommand) -> PollMessageOutput:
        state = PollingState(start=command.start, end=command.end, selected=frozenset())
        self._dialogue_state_port.save_state(conversation_id=conversation_id, state=state)
        logger.info(
            "poll_message: polling_started conversation_id=%s start=%s end=%s",
            conversation_id,
            state.start,
            state.end,
        )
        return PollMessageOutput(
            replies=[
                OutgoingMessage(text=f"start: {state.start}, end: {state.end}"),
                OutgoingMessage(
                    text=SELECT_DAYS_PROMPT,
                    keyboard=build_poll_keyboard(state.start, state.end, state.selected),
                ),
            ]
        )
