"""Rule registration for the deduction battery, in priority order."""

from __future__ import annotations

from ..step_runner import register_rule
from .boxline import rule_pointing
from .fish import rule_x_wing
from .propagate import rule_penciling
from .subsets import rule_hidden_pairs, rule_hidden_tuples

register_rule("penciling", rule_penciling)
register_rule("pointing", rule_pointing)
register_rule("hidden_pairs", rule_hidden_pairs)
register_rule("hidden_tuples", rule_hidden_tuples)
register_rule("x_wing", rule_x_wing)

__all__ = [
    "rule_hidden_pairs",
    "rule_hidden_tuples",
    "rule_penciling",
    "rule_pointing",
    "rule_x_wing",
]
