from __future__ import annotations

from typing import Dict, List, Optional

from langchain_core.tools import tool
from pydantic import BaseModel, Field

from .compatibility import estimate_total_tdp, recommended_psu_wattage
from .db import SpecResolver
from .service import CompatibilityService


class CheckCompatibilityInput(BaseModel):
    components: Dict[str, Optional[str]] = Field(
        description="Map of category (cpu, motherboard, gpu, ram, storage, psu, case, cooler) to product id"
    )


class EstimatePowerInput(BaseModel):
    product_ids: List[str] = Field(description="Product ids of the selected components")


class Toolset:
    def __init__(self, repo: SpecResolver, service: CompatibilityService | None = None):
        self.repo = repo
        self.service = service or CompatibilityService(repo)

    def register(self):
        repo = self.repo
        service = self.service

        @tool("check_compatibility", args_schema=CheckCompatibilityInput)
        def check_compatibility(components: Dict[str, Optional[str]]) -> dict:
            """Check socket, RAM type, form factor, GPU clearance and PSU wattage for a build."""
            outcome = service.check(components)
            payload = outcome.to_dict()
            payload["status_code"] = outcome.status_code
            return payload

        @tool("estimate_power", args_schema=EstimatePowerInput)
        def estimate_power(product_ids: List[str]) -> dict:
            """Sum component TDP and recommend a PSU wattage with 150W headroom and a 20% margin."""
            found = []
            for product_id in product_ids:
                component = repo.find_by_product_id(product_id)
                if component is not None:
                    found.append(component)
            total_tdp = estimate_total_tdp(found)
            return {
                "total_tdp_w": total_tdp,
                "recommended_psu_w": recommended_psu_wattage(total_tdp),
            }

        @tool("list_compatibility_rules")
        def list_compatibility_rules() -> List[dict]:
            """List the compatibility rules in the order they are evaluated."""
            return service.rules()

        return {
            "check_compatibility": check_compatibility,
            "estimate_power": estimate_power,
            "list_compatibility_rules": list_compatibility_rules,
        }
