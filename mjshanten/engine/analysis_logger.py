"""Analysis logger - records every evaluated hand of a session for later review."""

import json
import os
import uuid
from datetime import datetime
from typing import List, Optional

from mjshanten.engine.event import EventBus, EventType, SessionEvent

LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(
    os.path.abspath(__file__)))), "logs")


class AnalysisLogger:
    """Records a session's analyses to a JSON log file."""

    def __init__(self, config_info: dict, log_dir: Optional[str] = None):
        self.session_id = uuid.uuid4().hex[:12]
        self.timestamp = datetime.now().isoformat()
        self.config_info = config_info
        self.log_dir = log_dir or LOG_DIR

        self.entries: List[dict] = []
        self.ended_at: Optional[str] = None

    def subscribe_events(self, event_bus: EventBus):
        """Subscribe to session events for automatic logging."""
        event_bus.subscribe(EventType.ANALYSIS, self._on_analysis)
        event_bus.subscribe(EventType.ANALYSIS_ERROR, self._on_error)
        event_bus.subscribe(EventType.SETTING_CHANGE, self._on_setting)
        event_bus.subscribe(EventType.SESSION_END, self._on_session_end)

    def save(self) -> str:
        """Save the complete session log to a JSON file."""
        os.makedirs(self.log_dir, exist_ok=True)
        log_data = {
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "ended_at": self.ended_at,
            "config": self.config_info,
            "entries": self.entries,
        }

        filename = f"session_{self.session_id}.json"
        filepath = os.path.join(self.log_dir, filename)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(log_data, f, ensure_ascii=False, indent=2)

        return filepath

    # --- Event handlers ---

    def _log(self, kind: str, **kwargs):
        entry = {"kind": kind, "at": datetime.now().isoformat()}
        entry.update(kwargs)
        self.entries.append(entry)

    def _on_analysis(self, event: SessionEvent):
        d = event.data
        useful = d.get("useful_tiles")
        self._log(
            "analysis",
            input=d["input"],
            hand=str(d["hand"]),
            result=d["result"].to_dict(),
            useful_tiles=[u.tile.name for u in useful] if useful is not None else None,
        )

    def _on_error(self, event: SessionEvent):
        d = event.data
        self._log("error", input=d["input"], error=d["tag"], message=d["message"])

    def _on_setting(self, event: SessionEvent):
        d = event.data
        self._log("setting", setting=d["setting"], value=d["value"])

    def _on_session_end(self, event: SessionEvent):
        self.ended_at = datetime.now().isoformat()
