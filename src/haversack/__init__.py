"""haversack：袋子包含规则的解析与图查询。"""

from __future__ import annotations

from .config import RuleConfig
from .core.rule_system import RuleSummary, RuleSystem
from .errors import (
    ContainmentCycleError,
    HaversackError,
    MalformedCountError,
    RuleSyntaxError,
    UnknownColorError,
)

__all__ = [
    "ContainmentCycleError",
    "HaversackError",
    "MalformedCountError",
    "RuleConfig",
    "RuleSummary",
    "RuleSyntaxError",
    "RuleSystem",
    "UnknownColorError",
]
