"""Per-puzzle solve events appended to JSON Lines files.

Files live under ``<dir>/<YYYYMMDD>/solve_NN.jsonl``; a file that reaches
``max_bytes`` is closed off and the next index is opened.  Every event is
checked against :data:`~sudoku_cp.event_schema.SOLVE_EVENT_SCHEMA` before it
is written, so a rejected event never reaches disk.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from .event_schema import validate_event
from .project_config import get_config

__all__ = ["SolveEventLog", "append_event", "configure", "current_log_path", "events_enabled"]

_SETTINGS = get_config().get("solve_log", {})
DEFAULT_DIR = str(_SETTINGS.get("dir", "logs/solve"))
DEFAULT_MAX_BYTES = int(_SETTINGS.get("max_bytes", 100 * 1024 * 1024))


def events_enabled() -> bool:
    """Whether batches write solve events when the caller does not say."""
    return bool(get_config().get("solve_log", {}).get("enabled", False))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SolveEventLog:
    """Thread-safe writer of solve events into rotated daily files."""

    def __init__(self, directory: str | Path, max_bytes: int = DEFAULT_MAX_BYTES) -> None:
        self.directory = Path(directory)
        self.max_bytes = max_bytes
        self.active_path: Path | None = None
        self._lock = threading.Lock()

    def _has_room(self, path: Path) -> bool:
        return not path.exists() or path.stat().st_size < self.max_bytes

    def _target(self) -> Path:
        day_dir = self.directory / _utc_now().strftime("%Y%m%d")
        day_dir.mkdir(parents=True, exist_ok=True)
        active = self.active_path
        if active is not None and active.parent == day_dir and self._has_room(active):
            return active
        index = 0
        while not self._has_room(day_dir / f"solve_{index:02d}.jsonl"):
            index += 1
        self.active_path = day_dir / f"solve_{index:02d}.jsonl"
        return self.active_path

    def write(self, event: Dict[str, Any]) -> Path:
        record = dict(event)
        record.setdefault("ts", _utc_now().isoformat(timespec="milliseconds"))
        validate_event(record)
        line = json.dumps(record, sort_keys=True, ensure_ascii=False)
        with self._lock:
            target = self._target()
            with target.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        return target


_log = SolveEventLog(DEFAULT_DIR)


def configure(base_dir: str | Path, *, max_bytes: int | None = None) -> None:
    """Send subsequent events to ``base_dir``."""
    global _log
    _log = SolveEventLog(base_dir, max_bytes or DEFAULT_MAX_BYTES)


def append_event(event: Dict[str, Any]) -> Path:
    """Validate ``event``, write it and return the file it landed in."""
    return _log.write(event)


def current_log_path() -> Path | None:
    return _log.active_path
