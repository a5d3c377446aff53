from __future__ import annotations

from dataclasses import dataclass, field

from bookclub.domain.entities.dialogue import KeyboardButton


@dataclass(frozen=True)
class PollMessageInput:
    conversation_id: str
    text: str
    bot_username: str | None = None


@dataclass(frozen=True)
class PollCallbackInput:
    conversation_id: str
    data: str | None


@dataclass(frozen=True)
class OutgoingMessage:
    text: str
    keyboard: list[KeyboardButton] | None = None


@dataclass(frozen=True)
class PollMessageOutput:
    replies: list[OutgoingMessage] = field(default_factory=list)


@dataclass(frozen=True)
class PollCallbackOutput:
    keyboard: list[KeyboardButton] | None
