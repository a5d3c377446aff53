from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from bookclub.domain.entities.dialogue import KeyboardButton


SELECTED_MARK = "✅"
LABEL_FORMAT = "%a %d %b"
KEY_FORMAT = "%Y-%m-%d"


def poll_day_keys(start: datetime, end: datetime) -> list[str]:
    days = (end - start).days
    return [(start + timedelta(days=offset)).strftime(KEY_FORMAT) for offset in range(max(days, 0))]


def build_poll_keyboard(
    start: datetime,
    end: datetime,
    selected: Iterable[str],
) -> list[KeyboardButton]:
    selected_keys = set(selected)
    buttons: list[KeyboardButton] = []
    for offset in range(max((end - start).days, 0)):
        day = start + timedelta(days=offset)
        key = day.strftime(KEY_FORMAT)
        label = day.strftime(LABEL_FORMAT)
        if key in selected_keys:
            label = f"{label} {SELECTED_MARK}"
        buttons.append(KeyboardButton(label=label, payload=key))
    return buttons


def toggle_selected(selected: frozenset[str], key: str) -> frozenset[str]:
    if key in selected:
        return selected - {key}
    return selected | {key}
