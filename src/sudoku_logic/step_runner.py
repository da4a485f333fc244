"""Ordered dispatch of deduction rules."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .board import Board

RuleHandler = Callable[[Board], bool]

TRACE_LEVELS = ("none", "rules")

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleAttempt:
    """Record of one rule tried during a step."""

    step: int
    rule: str
    fired: bool


@dataclass
class RuleTraceRecorder:
    """In-memory accumulator of rule attempts respecting ``trace_level``."""

    trace_level: str = "none"
    entries: List[RuleAttempt] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.trace_level not in TRACE_LEVELS:
            raise ValueError(f"Unsupported trace level: {self.trace_level!r}")

    def record(self, entry: RuleAttempt) -> None:
        if self.trace_level == "none":
            return
        self.entries.append(entry)

    def snapshot(self) -> Tuple[RuleAttempt, ...]:
        return tuple(self.entries)

    def reset(self) -> None:
        self.entries.clear()


_RULE_REGISTRY: Dict[str, RuleHandler] = {}


def register_rule(name: str, handler: RuleHandler) -> None:
    """Append ``handler`` to the rule battery.

    Registration order is priority order: the runner tries rules in the order
    they were registered and stops at the first one that reports a change.
    """

    if name in _RULE_REGISTRY:
        raise ValueError(f"Rule already registered: {name!r}")
    _RULE_REGISTRY[name] = handler


def registered_rules() -> Tuple[Tuple[str, RuleHandler], ...]:
    return tuple(_RULE_REGISTRY.items())


class StepRunner:
    """Apply rules in priority order until one of them changes the board."""

    def __init__(
        self,
        *,
        rules: Optional[Sequence[Tuple[str, RuleHandler]]] = None,
        trace_level: str = "none",
        trace_recorder: Optional[RuleTraceRecorder] = None,
    ) -> None:
        self.rules: Tuple[Tuple[str, RuleHandler], ...] = (
            tuple(rules) if rules is not None else registered_rules()
        )
        self.trace_recorder = trace_recorder or RuleTraceRecorder(trace_level=trace_level)
        self._steps = 0

    @property
    def rule_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.rules)

    def run_step(self, board: Board) -> Optional[str]:
        """Run the battery against ``board`` in place.

        Returns the name of the rule that fired, or ``None`` when no rule
        could make progress.  Rules after the first success are not tried.
        """

        self._steps += 1
        for name, handler in self.rules:
            fired = bool(handler(board))
            self.trace_recorder.record(RuleAttempt(step=self._steps, rule=name, fired=fired))
            if fired:
                _LOGGER.debug("Step %d: %s made progress", self._steps, name)
                return name
        _LOGGER.debug("Step %d: no rule made progress", self._steps)
        return None


__all__ = [
    "RuleAttempt",
    "RuleHandler",
    "RuleTraceRecorder",
    "StepRunner",
    "TRACE_LEVELS",
    "register_rule",
    "registered_rules",
]
