from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Union

from .compatibility import (
    EVALUATION_ERROR,
    NO_COMPONENTS_ERROR,
    describe_rules,
    evaluate,
)
from .db import SpecResolver
from .schemas import (
    CATEGORIES,
    CompatibilityReport,
    CompatibilityRequest,
    Component,
    ComponentSnapshot,
)

logger = logging.getLogger(__name__)


@dataclass
class CheckOutcome:
    report: CompatibilityReport
    status_code: int = 200
    success: bool = True
    message: Optional[str] = None

    def to_dict(self) -> dict:
        payload: dict = {"success": self.success}
        if self.message is not None:
            payload["message"] = self.message
        payload["data"] = self.report.to_dict()
        return payload


class CompatibilityService:
    """
    兼容性检查服务 - Compatibility Check Service

    负责把请求中的 类别 -> 配件ID 解析成配件快照，调用评估器，
    并把结果或异常转换为带状态码的响应。
    Resolves the category -> product id request into a component snapshot,
    runs the evaluator, and turns the result or any fault into a response
    envelope with an HTTP-equivalent status code.
    """

    def __init__(self, resolver: SpecResolver):
        self.resolver = resolver

    def build_snapshot(self, components: Mapping[str, Optional[str]]) -> ComponentSnapshot:
        """
        构建配件快照 - Build component snapshot

        空 ID、未知类别和查不到的配件都会被跳过（记录警告）。
        Blank ids, unknown categories and unresolved components are skipped;
        the latter two are logged.
        """
        resolved: Dict[str, Component] = {}
        for category, product_id in components.items():
            if product_id is None or not str(product_id).strip():
                continue
            if category not in CATEGORIES:
                logger.warning("Ignoring unknown component category: %s", category)
                continue
            product_id = str(product_id).strip()
            component = self.resolver.find_by_product_id(product_id)
            if component is None:
                logger.warning("Component not found: %s in category %s", product_id, category)
                continue
            resolved[category] = component
        return ComponentSnapshot(components=resolved)

    def check(
        self,
        request: Union[CompatibilityRequest, Mapping[str, Optional[str]]],
    ) -> CheckOutcome:
        if not isinstance(request, CompatibilityRequest):
            request = CompatibilityRequest(components=dict(request))

        try:
            snapshot = self.build_snapshot(request.components)
            if snapshot.is_empty():
                return CheckOutcome(
                    report=CompatibilityReport.terminal_failure(NO_COMPONENTS_ERROR),
                    status_code=400,
                    success=False,
                    message="No valid components found",
                )
            report = evaluate(snapshot)
        except Exception as exc:
            logger.exception("Compatibility check error for components %s", request.components)
            return CheckOutcome(
                report=CompatibilityReport.terminal_failure(EVALUATION_ERROR),
                status_code=500,
                success=False,
                message=f"Error checking compatibility: {exc}",
            )

        logger.debug(
            "Evaluated %d components: valid=%s errors=%d",
            len(snapshot.components),
            report.valid,
            len(report.errors),
        )
        return CheckOutcome(report=report)

    def rules(self) -> List[dict]:
        return describe_rules()
