"""兼容性规则模块"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Tuple

from ..schemas import ComponentSnapshot, RuleResult
from ..specs import (
    BOARD_MEMORY_KEYS,
    PSU_WATTAGE_KEYS,
    RAM_TYPE_KEYS,
    SOCKET_KEYS,
)
from .power import estimate_total_tdp, recommended_psu_wattage

_DDR_IN_NAME = re.compile(r"(DDR[345])", re.IGNORECASE)

# 同时提供 DDR4 / DDR5 版本的平台
DUAL_MEMORY_SOCKETS = frozenset({"AM5", "LGA1700"})
# 只支持 DDR4 的平台
DDR4_SOCKETS = frozenset({"AM4", "LGA1200", "LGA1151"})


def check_socket(snapshot: ComponentSnapshot) -> RuleResult:
    """CPU 与主板插槽一致；两者都在但缺少插槽信息时判为不通过"""
    if not snapshot.has("cpu", "motherboard"):
        return RuleResult.ok("Insufficient components to check socket")

    cpu_socket = snapshot.lookup("cpu", SOCKET_KEYS)
    mb_socket = snapshot.lookup("motherboard", SOCKET_KEYS)
    if cpu_socket.is_missing or mb_socket.is_missing:
        return RuleResult.fail("Socket information missing")

    cpu_raw = str(cpu_socket.raw)
    mb_raw = str(mb_socket.raw)
    if cpu_socket.as_text().lower() == mb_socket.as_text().lower():
        return RuleResult.ok(f"CPU socket ({cpu_raw}) matches motherboard")
    return RuleResult.fail(f"CPU socket ({cpu_raw}) does not match motherboard ({mb_raw})")


def _board_memory_type(snapshot: ComponentSnapshot) -> str:
    """主板内存类型：先查规格，再从名称中提取"""
    declared = snapshot.lookup("motherboard", BOARD_MEMORY_KEYS)
    if not declared.is_missing:
        return declared.as_text()
    motherboard = snapshot.get("motherboard")
    match = _DDR_IN_NAME.search(motherboard.name if motherboard else "")
    if match:
        return match.group(1).upper()
    return ""


def check_ram_type(snapshot: ComponentSnapshot) -> RuleResult:
    """内存代数与主板兼容"""
    if not snapshot.has("ram", "motherboard"):
        return RuleResult.ok("Insufficient components to check RAM")

    ram_type = snapshot.lookup("ram", RAM_TYPE_KEYS).as_text()
    mb_type = _board_memory_type(snapshot)

    # 主板没有内存类型时按插槽推断
    if not mb_type:
        mb_socket = snapshot.lookup("motherboard", SOCKET_KEYS)
        if not mb_socket.is_missing:
            socket = mb_socket.as_text().upper()
            if socket in DUAL_MEMORY_SOCKETS:
                if ram_type.upper() in ("DDR4", "DDR5"):
                    return RuleResult.ok(
                        f"RAM type ({ram_type}) compatible - {socket} motherboards "
                        "support both DDR4 and DDR5"
                    )
            elif socket in DDR4_SOCKETS:
                mb_type = "DDR4"

    if not ram_type:
        return RuleResult.fail("RAM type information missing")
    if not mb_type:
        return RuleResult.ok("Cannot determine motherboard memory type, assuming compatible")

    ram_type = ram_type.upper()
    mb_type = mb_type.upper()
    # 主板类型可能是 "DDR4/DDR5" 这样的组合
    if ram_type == mb_type or ram_type in mb_type:
        return RuleResult.ok(f"RAM type ({ram_type}) compatible with motherboard ({mb_type})")
    return RuleResult.fail(f"RAM type ({ram_type}) NOT compatible with motherboard ({mb_type})")


def check_form_factor(snapshot: ComponentSnapshot) -> RuleResult:
    if not snapshot.has("motherboard", "case"):
        return RuleResult.ok("Insufficient components to check form factor")
    return RuleResult.ok("Form factor check passed")


def check_gpu_clearance(snapshot: ComponentSnapshot) -> RuleResult:
    if not snapshot.has("gpu", "case"):
        return RuleResult.ok("Insufficient components to check GPU clearance")
    return RuleResult.ok("GPU clearance check passed")


def check_psu_wattage(snapshot: ComponentSnapshot) -> RuleResult:
    """电源功率 >= ceil((全部配件 TDP + 150) * 1.2)"""
    if not snapshot.has("psu"):
        return RuleResult.ok("PSU not selected")

    wattage = snapshot.lookup("psu", PSU_WATTAGE_KEYS)
    # 0 / "0" / False 与缺失同样处理
    if wattage.is_falsy:
        return RuleResult.fail("PSU wattage information missing")

    recommended = recommended_psu_wattage(estimate_total_tdp(snapshot.parts()))
    psu_value = wattage.as_int()
    if psu_value >= recommended:
        return RuleResult.ok(f"PSU sufficient ({psu_value}W >= {recommended}W required)")
    return RuleResult.fail(f"PSU insufficient ({psu_value}W < {recommended}W required)")


@dataclass(frozen=True)
class CompatibilityRule:
    name: str
    categories: Tuple[str, ...]
    description: str
    check: Callable[[ComponentSnapshot], RuleResult]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "categories": list(self.categories),
            "description": self.description,
        }


# 固定执行顺序，errors 也按此顺序输出
RULES: Tuple[CompatibilityRule, ...] = (
    CompatibilityRule(
        "socket",
        ("cpu", "motherboard"),
        "CPU socket must match the motherboard socket",
        check_socket,
    ),
    CompatibilityRule(
        "ram_type",
        ("ram", "motherboard"),
        "RAM generation must be supported by the motherboard",
        check_ram_type,
    ),
    CompatibilityRule(
        "form_factor",
        ("motherboard", "case"),
        "Motherboard form factor must fit the case",
        check_form_factor,
    ),
    CompatibilityRule(
        "gpu_clearance",
        ("gpu", "case"),
        "Graphics card must fit inside the case",
        check_gpu_clearance,
    ),
    CompatibilityRule(
        "psu_wattage",
        ("psu",),
        "PSU wattage must cover total TDP plus 150W headroom and a 20% margin",
        check_psu_wattage,
    ),
)


def describe_rules() -> List[dict]:
    return [rule.to_dict() for rule in RULES]
