from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union


@dataclass(frozen=True)
class StartState:
    pass


@dataclass(frozen=True)
class PollingState:
    start: datetime
    end: datetime
    selected: frozenset[str] = field(default_factory=frozenset)


DialogueState = Union[StartState, PollingState]


@dataclass(frozen=True)
class KeyboardButton:
    label: str
    payload: str
