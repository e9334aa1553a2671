"""RigCheck：PC 配置兼容性评估"""

from .compatibility import evaluate
from .schemas import (
    CATEGORIES,
    CompatibilityReport,
    CompatibilityRequest,
    Component,
    ComponentSnapshot,
    RuleResult,
)

__all__ = [
    "evaluate",
    "CATEGORIES",
    "CompatibilityReport",
    "CompatibilityRequest",
    "Component",
    "ComponentSnapshot",
    "RuleResult",
]
