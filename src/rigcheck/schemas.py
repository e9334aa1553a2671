from __future__ import annotations

from typing import Dict, List, Literal, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .specs import MISSING, RawSpecValue, SpecValue, lookup


ComponentCategory = Literal[
    "cpu",
    "motherboard",
    "gpu",
    "ram",
    "storage",
    "psu",
    "case",
    "cooler",
]

CATEGORIES: Tuple[str, ...] = (
    "cpu",
    "motherboard",
    "gpu",
    "ram",
    "storage",
    "psu",
    "case",
    "cooler",
)

RuleName = Literal["socket", "ram_type", "form_factor", "gpu_clearance", "psu_wattage"]


class Component(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: str
    name: str = ""
    category: ComponentCategory
    brand: str = ""
    lowest_price_bdt: Optional[Union[int, float]] = None
    specs: Dict[str, RawSpecValue] = Field(default_factory=dict)

    def spec(self, *aliases: str) -> SpecValue:
        return lookup(self.specs, aliases)


class ComponentSnapshot(BaseModel):
    """一次评估的配件快照：类别 -> 配件，只读"""

    model_config = ConfigDict(frozen=True)

    components: Dict[ComponentCategory, Component] = Field(default_factory=dict)

    def has(self, *categories: str) -> bool:
        return all(c in self.components for c in categories)

    def get(self, category: str) -> Optional[Component]:
        return self.components.get(category)

    def lookup(self, category: str, aliases: Sequence[str]) -> SpecValue:
        component = self.components.get(category)
        if component is None:
            return MISSING
        return lookup(component.specs, aliases)

    def parts(self) -> List[Component]:
        return list(self.components.values())

    def is_empty(self) -> bool:
        return not self.components


class RuleResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    passed: bool = Field(alias="pass")
    message: str
    warning: Optional[str] = None

    @classmethod
    def ok(cls, message: str) -> "RuleResult":
        return cls(passed=True, message=message)

    @classmethod
    def fail(cls, message: str) -> "RuleResult":
        return cls(passed=False, message=message)

    def to_dict(self) -> Dict[str, Union[bool, str]]:
        data: Dict[str, Union[bool, str]] = {"pass": self.passed, "message": self.message}
        if self.warning is not None:
            data["warning"] = self.warning
        return data


class CompatibilitySummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_cost_bdt: Union[int, float] = 0
    total_tdp_w: int = 0
    recommended_psu_w: int = 0


class CompatibilityReport(BaseModel):
    """兼容性报告，每次评估新建，不做持久化"""

    model_config = ConfigDict(frozen=True)

    valid: bool
    warnings: List[str] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    summary: CompatibilitySummary = Field(default_factory=CompatibilitySummary)
    compatibility_checks: Dict[RuleName, RuleResult] = Field(default_factory=dict)

    @classmethod
    def terminal_failure(cls, error: str) -> "CompatibilityReport":
        return cls(valid=False, errors=[error])

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
            "summary": self.summary.model_dump(),
            "compatibility_checks": {
                name: result.to_dict() for name, result in self.compatibility_checks.items()
            },
        }


class CompatibilityRequest(BaseModel):
    components: Dict[str, Optional[str]] = Field(
        description="Category name to component product id"
    )
