"""
兼容性评估模块 - Compatibility Evaluation Module

对配件快照依次执行全部规则，汇总结果并计算总价、总功耗与建议电源功率。
纯函数：不做 I/O，不修改输入，相同快照得到相同报告。
Runs every rule over a component snapshot, aggregates the results and
computes total cost, total TDP and recommended PSU wattage. Pure function:
no I/O, no mutation, identical snapshots yield identical reports.
"""

from __future__ import annotations

from typing import Dict

from ..schemas import (
    CompatibilityReport,
    CompatibilitySummary,
    ComponentSnapshot,
    RuleResult,
)
from .power import estimate_total_tdp, recommended_psu_wattage
from .rules import RULES

NO_COMPONENTS_ERROR = "No components could be loaded"
EVALUATION_ERROR = "An error occurred while checking compatibility"


def summarize(snapshot: ComponentSnapshot) -> CompatibilitySummary:
    """
    汇总指标 - Summary Metrics

    缺少价格的配件按 0 计；建议电源功率与是否选择电源无关。
    Missing prices count as 0; the recommendation is computed whether or not a PSU was chosen.
    """
    parts = snapshot.parts()
    total_tdp = estimate_total_tdp(parts)
    return CompatibilitySummary(
        total_cost_bdt=sum(p.lowest_price_bdt or 0 for p in parts),
        total_tdp_w=total_tdp,
        recommended_psu_w=recommended_psu_wattage(total_tdp),
    )


def evaluate(snapshot: ComponentSnapshot) -> CompatibilityReport:
    """
    评估配置兼容性 - Evaluate Build Compatibility

    全部规则都会执行，不会因为某条失败而短路。
    Every rule runs; a failing rule never short-circuits the rest.

    参数 Parameters:
        snapshot: 已解析的配件快照
                  Resolved component snapshot

    返回 Returns:
        兼容性报告；快照为空时返回终止失败报告
        Compatibility report; a terminal failure report when the snapshot is empty
    """
    if snapshot.is_empty():
        return CompatibilityReport.terminal_failure(NO_COMPONENTS_ERROR)

    checks: Dict[str, RuleResult] = {rule.name: rule.check(snapshot) for rule in RULES}

    errors = [result.message for result in checks.values() if not result.passed]
    warnings = [result.warning for result in checks.values() if result.warning is not None]

    return CompatibilityReport(
        valid=not errors,
        warnings=warnings,
        errors=errors,
        summary=summarize(snapshot),
        compatibility_checks=checks,
    )
