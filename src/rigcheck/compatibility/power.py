"""
功耗估算模块 - Power Estimation Module

汇总所选配件的 TDP，并计算建议电源功率。
Sum TDP across the selected components and compute the recommended PSU wattage.
"""

from __future__ import annotations

from typing import Iterable

from ..schemas import Component
from ..specs import TDP_KEYS

# 基础功耗余量（CPU/显卡以外的系统功耗）- baseline draw outside CPU/GPU
HEADROOM_W = 150
# 20% 安全余量，以分数表示避免浮点误差 - 1.2 safety margin as 6/5
MARGIN_NUMERATOR = 6
MARGIN_DENOMINATOR = 5


def component_tdp(component: Component) -> int:
    """单个配件的 TDP，缺失或无法解析时为 0"""
    return component.spec(*TDP_KEYS).as_int()


def estimate_total_tdp(components: Iterable[Component]) -> int:
    """
    估算总功耗 - Estimate Total TDP

    对所有配件（不仅是 CPU/显卡）的 tdp / power_consumption 求和。
    Sums tdp / power_consumption over every supplied component, not only CPU and GPU.
    """
    return sum(component_tdp(c) for c in components)


def recommended_psu_wattage(total_tdp_w: int) -> int:
    """
    建议电源功率 - Recommended PSU Wattage

    ceil((总功耗 + 150) * 1.2)，用整数运算保证结果精确。
    ceil((total + 150) * 1.2), computed in integer arithmetic.
    """
    scaled = (total_tdp_w + HEADROOM_W) * MARGIN_NUMERATOR
    return -(-scaled // MARGIN_DENOMINATOR)
