"""Command line front-end: solve puzzles given as arguments or in a file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List

from . import __version__, events
from .config import LOG_LEVELS, Settings, resolve_settings
from .errors import InvalidInputError
from .log import configure_logging
from .step_runner import StepRunner
from .sudoku import Sudoku
from .trace import SolveTrace, validate_trace_payload

_LOGGER = logging.getLogger(__name__)



def _iter_puzzles(path: Path) -> Iterable[str]:
    for line in path.read_text(encoding="utf-8").splitlines():
        value = line.strip().replace(" ", "")
        if not value or value.startswith("#"):
            continue
        yield value


def _solve_one(puzzle: str, settings: Settings, *, quiet: bool) -> Sudoku:
    game = Sudoku(
        puzzle,
        runner=StepRunner(trace_level=settings.trace_level),
        trace=SolveTrace(puzzle),
    )
    print(game.to_string())

    step = 0
    updated = True
    while updated and step < settings.max_steps:
        step += 1
        if not quiet:
            print(f"Step: {step}")
            print(game.to_table(), end="", flush=True)
        updated = game.solve_step()
    if updated:
        _LOGGER.warning("Stopped after %d steps without reaching a fixpoint", step)

    for attempt in game.runner.trace_recorder.snapshot():
        _LOGGER.debug("step %d: %s %s", attempt.step, attempt.rule, "fired" if attempt.fired else "idle")

    print(game.to_string())
    print(f"Steps taken: {game.steps_taken()}")
    print(f"Solved: {'yes' if game.solved() else 'no'}")
    return game


def _write_traces(path: Path, payloads: List[dict]) -> None:
    for payload in payloads:
        validate_trace_payload(payload)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payloads, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def cmd_solve(args: argparse.Namespace) -> int:
    settings = resolve_settings().override(
        max_steps=args.max_steps,
        console_level=args.log_level,
        log_file=args.log_file,
        events_dir=args.events_dir,
    )
    if args.events_dir:
        settings = settings.override(events_enabled=True)

    configure_logging(
        console_level=settings.console_level,
        log_file=settings.log_file or None,
        file_level=settings.file_level,
        fmt=settings.log_format,
    )
    event_log = (
        events.EventLog(settings.events_dir, max_bytes=settings.events_max_bytes)
        if settings.events_enabled
        else None
    )

    puzzles: List[str] = list(args.sudokus)
    if args.file:
        try:
            puzzles.extend(_iter_puzzles(Path(args.file)))
        except OSError as exc:
            print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
            return 1

    _LOGGER.info("Solving %d sudoku(s)", len(puzzles))
    failures = 0
    payloads: List[dict] = []
    for puzzle in puzzles:
        try:
            game = _solve_one(puzzle, settings, quiet=args.quiet)
        except InvalidInputError as exc:
            print(exc, file=sys.stderr)
            failures += 1
            continue
        if game.trace is not None:
            payloads.append(game.trace.to_payload())
        if event_log is not None:
            event_log.append(events.solve_event(game))

    if args.trace:
        _write_traces(Path(args.trace), payloads)
    return 1 if failures else 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sudoku-logic", description="A Sudoku Solver")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"Sudoku, version {__version__}",
        help="Print the current version number",
    )
    parser.add_argument("sudokus", nargs="*", help="Sudokus to solve")
    parser.add_argument("-f", "--file", help="File of sudokus to solve, one per line")
    parser.add_argument("--max-steps", type=int, default=None, help="Stop a puzzle after N steps")
    parser.add_argument("--trace", default=None, help="Write the JSON solve traces to PATH")
    parser.add_argument("--events-dir", default=None, help="Append solve events (JSONL) below DIR")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Console log level")
    parser.add_argument("--log-file", default=None, help="Debug log file ('' disables it)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not print the board after every step")
    parser.set_defaults(func=cmd_solve)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.sudokus and not args.file:
        parser.error("no sudokus given")
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
