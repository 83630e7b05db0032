"""Command parsing for one line of session input."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from mjshanten.core.hand import Hand

LANGUAGES = ("zh", "ja", "en")


class OutputFormat(Enum):
    STANDARD = "standard"
    JSON = "json"


class CommandType(Enum):
    HAND = "hand"
    HELP = "help"
    EXIT = "exit"
    OUTPUT_FORMAT = "output_format"
    LANGUAGE = "language"
    HISTORY = "history"
    TOGGLE_USEFUL = "toggle_useful"


class CommandError(Exception):
    """Raised for a recognized command with a bad argument."""
    tag = "InvalidCommand"


@dataclass(frozen=True)
class Command:
    command_type: CommandType
    argument: Any = None


_KEYWORDS = {
    "q": Command(CommandType.EXIT),
    "quit": Command(CommandType.EXIT),
    "exit": Command(CommandType.EXIT),
    "h": Command(CommandType.HELP),
    "help": Command(CommandType.HELP),
    "std": Command(CommandType.OUTPUT_FORMAT, OutputFormat.STANDARD),
    "standard": Command(CommandType.OUTPUT_FORMAT, OutputFormat.STANDARD),
    "json": Command(CommandType.OUTPUT_FORMAT, OutputFormat.JSON),
    "log": Command(CommandType.HISTORY),
    "history": Command(CommandType.HISTORY),
    "u": Command(CommandType.TOGGLE_USEFUL),
    "useful": Command(CommandType.TOGGLE_USEFUL),
}


def parse_command(line: str) -> Optional[Command]:
    """Parse one input line. Returns None for blank input.

    Anything that is not a keyword is read as hand notation, so notation
    errors (NotationError, InvalidMeldShape) propagate from here.
    """
    text = line.strip()
    if not text:
        return None

    lowered = text.lower()
    if lowered in _KEYWORDS:
        return _KEYWORDS[lowered]

    parts = lowered.split()
    if parts[0] == "lang":
        if len(parts) != 2 or parts[1] not in LANGUAGES:
            raise CommandError(f"Usage: lang <{'|'.join(LANGUAGES)}>")
        return Command(CommandType.LANGUAGE, parts[1])

    return Command(CommandType.HAND, Hand.from_string(text))
