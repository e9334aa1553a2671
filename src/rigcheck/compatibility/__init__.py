"""Compatibility 模块：规则、功耗估算与评估"""

from .evaluator import EVALUATION_ERROR, NO_COMPONENTS_ERROR, evaluate, summarize
from .power import estimate_total_tdp, recommended_psu_wattage
from .rules import RULES, CompatibilityRule, describe_rules

__all__ = [
    "evaluate",
    "summarize",
    "estimate_total_tdp",
    "recommended_psu_wattage",
    "RULES",
    "CompatibilityRule",
    "describe_rules",
    "NO_COMPONENTS_ERROR",
    "EVALUATION_ERROR",
]
