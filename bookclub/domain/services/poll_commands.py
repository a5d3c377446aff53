from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

import dateparser

from bookclub.domain.exceptions import PollCommandParseError


COMMAND_PREFIX = "/"
DATE_RANGE_SEPARATOR = " to "
HELP_HEADER = "These commands are supported:"
ISO_DATE_FORMAT = "%Y-%m-%d"

# Day-month order, matching UK usage.
_DATEPARSER_SETTINGS = {
    "DATE_ORDER": "DMY",
    "RETURN_AS_TIMEZONE_AWARE": False,
}


@dataclass(frozen=True)
class EchoCommand:
    text: str


@dataclass(frozen=True)
class PollDateCommand:
    start: datetime
    end: datetime


@dataclass(frozen=True)
class HelpCommand:
    pass


BotCommand = Union[EchoCommand, PollDateCommand, HelpCommand]

COMMAND_DESCRIPTIONS: tuple[tuple[str, str], ...] = (
    ("echo", "echo the text"),
    ("polldate", "create a poll for dates between start and end"),
    ("help", "display this text"),
)


def describe_commands() -> str:
    lines = [HELP_HEADER]
    lines.extend(f"{COMMAND_PREFIX}{name} - {description}" for name, description in COMMAND_DESCRIPTIONS)
    return "\n".join(lines)


def parse_natural_date(value: str, *, now: datetime) -> datetime | None:
    value = value.strip()
    # ISO dates are year-month-day regardless of DATE_ORDER.
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT)
    except ValueError:
        pass
    settings = dict(_DATEPARSER_SETTINGS)
    settings["RELATIVE_BASE"] = now
    return dateparser.parse(value, languages=["en"], settings=settings)


def split_dates(args: str, *, now: datetime) -> tuple[datetime, datetime]:
    parts = args.split(DATE_RANGE_SEPARATOR)
    if len(parts) < 2:
        raise PollCommandParseError("dates must be separated by 'to'")
    raw_start, raw_end = parts[0], parts[1]

    start = parse_natural_date(raw_start, now=now)
    if start is None:
        raise PollCommandParseError(f"unable to parse start date: '{raw_start}'")
    end = parse_natural_date(raw_end, now=now)
    if end is None:
        raise PollCommandParseError(f"unable to parse end date: '{raw_end}'")
    return start, end


def parse_command(text: str, *, bot_username: str | None, now: datetime) -> BotCommand:
    stripped = text.strip()
    if not stripped.startswith(COMMAND_PREFIX):
        raise PollCommandParseError(f"Unknown command: {stripped}")

    head, _, args = stripped[len(COMMAND_PREFIX):].partition(" ")
    name, _, addressed_to = head.partition("@")
    if addressed_to and bot_username and addressed_to.lower() != bot_username.lower():
        raise PollCommandParseError(f"Wrong bot name: {addressed_to}")
    args = args.strip()

    if name == "echo":
        return EchoCommand(text=args)
    if name == "polldate":
        start, end = split_dates(args, now=now)
        return PollDateCommand(start=start, end=end)
    if name == "help":
        if args:
            raise PollCommandParseError("Too many arguments for /help")
        return HelpCommand()
    raise PollCommandParseError(f"Unknown command: {name}")
