"""Analysis session - executes input lines and keeps the history."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from mjshanten.core.errors import MalformedHandError
from mjshanten.core.hand import Hand
from mjshanten.engine.command import (
    CommandError, CommandType, OutputFormat, parse_command,
)
from mjshanten.engine.event import EventBus, EventType, SessionEvent
from mjshanten.rules.shanten import ShantenResult, analyze
from mjshanten.rules.ukeire import UsefulTile, useful_tiles


class AnalyzerConfig:
    """Session configuration."""

    def __init__(
        self,
        language: str = "zh",
        output_format: OutputFormat = OutputFormat.STANDARD,
        show_useful_tiles: bool = True,  # Report ukeire for 13-tile hands
        save_log: bool = True,
        log_dir: Optional[str] = None,   # None -> analysis_logger.LOG_DIR
    ):
        self.language = language
        self.output_format = output_format
        self.show_useful_tiles = show_useful_tiles
        self.save_log = save_log
        self.log_dir = log_dir

    def to_dict(self) -> dict:
        return {
            "language": self.language,
            "output_format": self.output_format.value,
            "show_useful_tiles": self.show_useful_tiles,
        }


class ReplyType(Enum):
    RESULT = "result"
    ERROR = "error"
    INFO = "info"
    HELP = "help"
    HISTORY = "history"
    EXIT = "exit"
    EMPTY = "empty"


@dataclass
class HistoryEntry:
    input: str
    shanten: Optional[int] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        if self.error is not None:
            return {"input": self.input, "error": self.error}
        return {"input": self.input, "shanten": self.shanten}


@dataclass
class SessionReply:
    """Outcome of one executed line, rendered by the UI."""
    reply_type: ReplyType
    hand: Optional[Hand] = None
    result: Optional[ShantenResult] = None
    useful_tiles: Optional[List[UsefulTile]] = None
    error_tag: Optional[str] = None
    message: str = ""
    history: List[HistoryEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        if self.reply_type == ReplyType.ERROR:
            return {"error": self.error_tag, "message": self.message}
        if self.reply_type == ReplyType.RESULT:
            data = self.result.to_dict()
            data["hand"] = str(self.hand)
            data["useful_tiles"] = (
                [{"tile": u.tile.name, "remaining": u.remaining,
                  "shanten_after": u.shanten_after} for u in self.useful_tiles]
                if self.useful_tiles is not None else None
            )
            return data
        if self.reply_type == ReplyType.HISTORY:
            return {"history": [h.to_dict() for h in self.history]}
        return {"message": self.message}


class AnalysisSession:
    """Runs commands against the shanten engine.

    Errors from parsing or validation are turned into ERROR replies;
    nothing raised by the engine escapes `execute`.
    """

    def __init__(self, config: AnalyzerConfig, event_bus: Optional[EventBus] = None):
        self.config = config
        self.event_bus = event_bus or EventBus()
        self.history: List[HistoryEntry] = []
        self.is_finished = False

    def start(self):
        self.event_bus.emit(SessionEvent(EventType.SESSION_START, {
            "config": self.config.to_dict(),
        }))

    def finish(self):
        if self.is_finished:
            return
        self.is_finished = True
        self.event_bus.emit(SessionEvent(EventType.SESSION_END, {
            "analyses": len(self.history),
        }))

    def execute(self, line: str) -> SessionReply:
        """Execute one input line."""
        try:
            command = parse_command(line)
        except (MalformedHandError, CommandError) as e:
            return self._error(line.strip(), e.tag, str(e))

        if command is None:
            return SessionReply(ReplyType.EMPTY)

        ct = command.command_type
        if ct == CommandType.HAND:
            return self._analyze(line.strip(), command.argument)
        if ct == CommandType.EXIT:
            self.finish()
            return SessionReply(ReplyType.EXIT)
        if ct == CommandType.HELP:
            return SessionReply(ReplyType.HELP)
        if ct == CommandType.HISTORY:
            return SessionReply(ReplyType.HISTORY, history=list(self.history))
        if ct == CommandType.OUTPUT_FORMAT:
            self.config.output_format = command.argument
            return self._setting("output_format", command.argument.value)
        if ct == CommandType.LANGUAGE:
            from mjshanten.ui.i18n import set_language
            self.config.language = command.argument
            set_language(command.argument)
            return self._setting("language", command.argument)
        if ct == CommandType.TOGGLE_USEFUL:
            self.config.show_useful_tiles = not self.config.show_useful_tiles
            return self._setting("show_useful_tiles", self.config.show_useful_tiles)
        raise ValueError(f"Unhandled command type: {ct}")

    def _analyze(self, text: str, hand: Hand) -> SessionReply:
        try:
            result = analyze(hand)
        except MalformedHandError as e:
            return self._error(text, e.tag, str(e))

        useful = None
        if self.config.show_useful_tiles and hand.is_waiting:
            useful = useful_tiles(hand)

        self.history.append(HistoryEntry(text, shanten=result.shanten))
        self.event_bus.emit(SessionEvent(EventType.ANALYSIS, {
            "input": text,
            "hand": hand,
            "result": result,
            "useful_tiles": useful,
        }))
        return SessionReply(ReplyType.RESULT, hand=hand, result=result, useful_tiles=useful)

    def _error(self, text: str, tag: str, message: str) -> SessionReply:
        self.history.append(HistoryEntry(text, error=tag))
        self.event_bus.emit(SessionEvent(EventType.ANALYSIS_ERROR, {
            "input": text,
            "tag": tag,
            "message": message,
        }))
        return SessionReply(ReplyType.ERROR, error_tag=tag, message=message)

    def _setting(self, setting: str, value) -> SessionReply:
        self.event_bus.emit(SessionEvent(EventType.SETTING_CHANGE, {
            "setting": setting,
            "value": value,
        }))
        return SessionReply(ReplyType.INFO, message=f"{setting}={value}")
