"""Tests for session.py - executing input lines"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mjshanten.engine.command import OutputFormat
from mjshanten.engine.event import EventBus, EventType
from mjshanten.engine.session import AnalysisSession, AnalyzerConfig, ReplyType
from mjshanten.ui.i18n import get_language, set_language


@pytest.fixture
def session():
    return AnalysisSession(AnalyzerConfig(save_log=False))


class TestAnalyzerConfig:
    def test_defaults(self):
        config = AnalyzerConfig()
        assert config.language == "zh"
        assert config.output_format == OutputFormat.STANDARD
        assert config.show_useful_tiles
        assert config.to_dict() == {
            "language": "zh",
            "output_format": "standard",
            "show_useful_tiles": True,
        }


class TestExecute:
    def test_complete_hand(self, session):
        reply = session.execute("123m222p456s777z99m")
        assert reply.reply_type == ReplyType.RESULT
        assert reply.result.shanten == -1
        # 14 tiles: no useful-tile report
        assert reply.useful_tiles is None

    def test_waiting_hand_reports_useful_tiles(self, session):
        reply = session.execute("123m222p456s77z99m")
        assert [u.tile.name for u in reply.useful_tiles] == ["9m", "7z"]
        data = reply.to_dict()
        assert data["hand"] == "12399m222p456s77z"
        assert data["useful_tiles"][0] == {"tile": "9m", "remaining": 2, "shanten_after": -1}

    def test_useful_tiles_toggle(self, session):
        reply = session.execute("u")
        assert reply.reply_type == ReplyType.INFO
        assert reply.message == "show_useful_tiles=False"
        assert session.execute("123m222p456s77z99m").useful_tiles is None

    def test_blank_line(self, session):
        assert session.execute("  ").reply_type == ReplyType.EMPTY
        assert session.history == []

    def test_malformed_size(self, session):
        reply = session.execute("1234567m")
        assert reply.reply_type == ReplyType.ERROR
        assert reply.error_tag == "MalformedHandSize"
        assert reply.to_dict()["error"] == "MalformedHandSize"

    def test_notation_error(self, session):
        reply = session.execute("12x")
        assert reply.error_tag == "InvalidNotation"

    def test_too_many_copies(self, session):
        reply = session.execute("11111m")
        assert reply.error_tag == "InvalidTileCount"

    def test_bad_command(self, session):
        assert session.execute("lang xx").error_tag == "InvalidCommand"

    def test_output_format(self, session):
        session.execute("json")
        assert session.config.output_format == OutputFormat.JSON

    def test_language(self, session):
        try:
            reply = session.execute("lang en")
            assert reply.message == "language=en"
            assert session.config.language == "en"
            assert get_language() == "en"
        finally:
            set_language("zh")


class TestHistory:
    def test_records_results_and_errors(self, session):
        session.execute("123m222p456s777z99m")
        session.execute("1234567m")
        session.execute("json")
        reply = session.execute("log")
        assert reply.reply_type == ReplyType.HISTORY
        assert reply.to_dict() == {"history": [
            {"input": "123m222p456s777z99m", "shanten": -1},
            {"input": "1234567m", "error": "MalformedHandSize"},
        ]}


class TestEvents:
    def test_events_emitted(self):
        bus = EventBus()
        seen = []
        for et in EventType:
            bus.subscribe(et, lambda e: seen.append(e.event_type))
        session = AnalysisSession(AnalyzerConfig(save_log=False), bus)
        session.start()
        session.execute("123m222p456s777z99m")
        session.execute("11m[124m]")
        session.execute("std")
        session.execute("q")
        assert seen == [
            EventType.SESSION_START,
            EventType.ANALYSIS,
            EventType.ANALYSIS_ERROR,
            EventType.SETTING_CHANGE,
            EventType.SESSION_END,
        ]

    def test_finish_once(self):
        bus = EventBus()
        ends = []
        bus.subscribe(EventType.SESSION_END, ends.append)
        session = AnalysisSession(AnalyzerConfig(save_log=False), bus)
        assert session.execute("quit").reply_type == ReplyType.EXIT
        session.finish()
        assert session.is_finished
        assert len(ends) == 1
        assert ends[0].data == {"analyses": 0}

    def test_clear_listeners(self):
        bus = EventBus()
        seen = []
        bus.subscribe(EventType.ANALYSIS, seen.append)
        bus.clear()
        AnalysisSession(AnalyzerConfig(save_log=False), bus).execute("11z")
        assert seen == []
