from __future__ import annotations

from typing import Protocol

from bookclub.domain.entities.dialogue import DialogueState


class DialogueStatePort(Protocol):
    def get_state(self, *, conversation_id: str) -> DialogueState:
        ...

    def save_state(self, *, conversation_id: str, state: DialogueState) -> None:
        ...
