"""JSONL record of finished solves, one file series per UTC day."""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

if TYPE_CHECKING:
    from .sudoku import Sudoku

EVENT_TYPE = "sudoku.solve.v1"

DEFAULT_MAX_BYTES = 100 * 1024 * 1024


class EventLog:
    """Append solve events below ``base_dir/<YYYYMMDD>/solve_NN.jsonl``.

    A file is reused until it holds ``max_bytes``; the next event then opens
    the following number.  Appends from several threads are serialised.
    """

    def __init__(self, base_dir: str | Path, *, max_bytes: Optional[int] = None) -> None:
        self.base_dir = Path(base_dir)
        self.max_bytes = max_bytes or DEFAULT_MAX_BYTES
        self._lock = threading.Lock()
        self._path: Optional[Path] = None

    @property
    def path(self) -> Optional[Path]:
        """File written by the last append, if any."""

        return self._path

    def _target(self, now: datetime) -> Path:
        day_dir = self.base_dir / now.strftime("%Y%m%d")
        if self._path is None or self._path.parent != day_dir:
            existing = sorted(day_dir.glob("solve_*.jsonl"))
            self._path = existing[-1] if existing else day_dir / "solve_00.jsonl"
        if self._path.exists() and self._path.stat().st_size >= self.max_bytes:
            number = int(self._path.stem.rsplit("_", 1)[1]) + 1
            self._path = day_dir / f"solve_{number:02d}.jsonl"
        return self._path

    def append(self, event: Mapping[str, Any]) -> Path:
        """Write ``event`` as one line, stamping ``ts`` when it has none."""

        now = datetime.now(timezone.utc)
        record = dict(event)
        record.setdefault("ts", now.isoformat(timespec="milliseconds"))
        line = json.dumps(record, sort_keys=True, ensure_ascii=False)
        with self._lock:
            path = self._target(now)
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        return path


def solve_event(game: "Sudoku") -> Dict[str, Any]:
    """Summarise a finished solve as an event payload."""

    return {
        "type": EVENT_TYPE,
        "puzzle": game.puzzle,
        "result": game.to_string(),
        "solved": game.solved(),
        "steps_taken": game.steps_taken(),
        "techniques": game.trace.techniques() if game.trace is not None else {},
    }


__all__ = ["DEFAULT_MAX_BYTES", "EVENT_TYPE", "EventLog", "solve_event"]
