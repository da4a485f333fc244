from __future__ import annotations

import json
import threading
from pathlib import Path

from sudoku_logic import Sudoku, events
from sudoku_logic.samples import SIMPLE, SIMPLE_SOLUTION
from sudoku_logic.trace import SolveTrace


def _read(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_events_are_appended_below_a_date_directory(tmp_path: Path) -> None:
    log = events.EventLog(tmp_path)
    assert log.path is None

    first = log.append({"type": "probe", "n": 1})
    second = log.append({"type": "probe", "n": 2, "ts": "fixed"})

    assert first == second == log.path
    assert first.name == "solve_00.jsonl"
    assert first.parent.parent == tmp_path
    assert len(first.parent.name) == 8 and first.parent.name.isdigit()
    records = _read(first)
    assert [record["n"] for record in records] == [1, 2]
    assert "ts" in records[0]
    assert records[1]["ts"] == "fixed"


def test_full_file_rotates(tmp_path: Path) -> None:
    log = events.EventLog(tmp_path, max_bytes=10)

    paths = [log.append({"type": "probe", "n": n}) for n in range(3)]

    assert [path.name for path in paths] == [
        "solve_00.jsonl",
        "solve_01.jsonl",
        "solve_02.jsonl",
    ]
    assert [len(_read(path)) for path in paths] == [1, 1, 1]


def test_new_log_continues_the_latest_file(tmp_path: Path) -> None:
    first = events.EventLog(tmp_path).append({"type": "probe", "n": 1})
    second = events.EventLog(tmp_path).append({"type": "probe", "n": 2})

    assert second == first
    assert [record["n"] for record in _read(first)] == [1, 2]


def test_concurrent_appends_keep_whole_lines(tmp_path: Path) -> None:
    log = events.EventLog(tmp_path)

    def worker(offset: int) -> None:
        for n in range(25):
            log.append({"type": "probe", "n": offset + n})

    threads = [threading.Thread(target=worker, args=(offset,)) for offset in (0, 100, 200)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert log.path is not None
    records = _read(log.path)
    assert len(records) == 75
    assert len({record["n"] for record in records}) == 75


def test_solve_event_summarises_the_game() -> None:
    game = Sudoku(SIMPLE, trace=SolveTrace(SIMPLE))
    game.solve()

    event = events.solve_event(game)

    assert event["type"] == events.EVENT_TYPE
    assert event["puzzle"] == SIMPLE
    assert event["result"] == SIMPLE_SOLUTION
    assert event["solved"] is True
    assert event["steps_taken"] == game.steps_taken()
    assert sum(event["techniques"].values()) == game.steps_taken() - 2


def test_solve_event_without_trace_has_no_techniques() -> None:
    game = Sudoku(SIMPLE)
    assert events.solve_event(game)["techniques"] == {}
