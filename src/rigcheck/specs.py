"""
配件规格值模块 - Component Spec Value Module

配件规格以松散类型的键值对存储，这里把它们包装成带标签的值类型，
并提供与上游一致的数字清洗/解析规则，以及按顺序回退的别名查找。
Component specs arrive as loosely-typed key/value pairs. This module wraps
them in a tagged value type, provides the digit-stripping integer coercion
used by the compatibility rules, and resolves ordered alias chains.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Mapping, Sequence, Tuple, Union

RawSpecValue = Union[str, int, float, bool, None]


class SpecKind(str, Enum):
    TEXT = "text"
    INT = "int"
    DECIMAL = "decimal"
    BOOL = "bool"
    MISSING = "missing"


# 数字清洗：只保留数字与正负号 - keep digits and signs only
_NON_NUMERIC = re.compile(r"[^0-9+\-]")
_LEADING_INT = re.compile(r"^[+\-]?\d+")


@dataclass(frozen=True)
class SpecValue:
    """
    规格值 - Spec Value

    带标签的规格值：Text / Int / Decimal / Bool / Missing。
    Tagged spec value: Text / Int / Decimal / Bool / Missing.
    """

    kind: SpecKind
    raw: RawSpecValue = None

    @classmethod
    def of(cls, raw: object) -> "SpecValue":
        """
        从原始值构建 - Build from raw value

        空字符串（或仅含空白）视为缺失。
        Empty or whitespace-only text counts as missing.
        """
        if raw is None:
            return MISSING
        if isinstance(raw, SpecValue):
            return raw
        # bool 是 int 的子类，必须先判断
        if isinstance(raw, bool):
            return cls(SpecKind.BOOL, raw)
        if isinstance(raw, int):
            return cls(SpecKind.INT, raw)
        if isinstance(raw, (float, Decimal)):
            return cls(SpecKind.DECIMAL, float(raw))
        text = str(raw)
        if not text.strip():
            return MISSING
        return cls(SpecKind.TEXT, text)

    @property
    def is_missing(self) -> bool:
        return self.kind is SpecKind.MISSING

    @property
    def is_falsy(self) -> bool:
        """缺失、0、"0" 或 False"""
        if self.is_missing:
            return True
        if self.kind is SpecKind.TEXT:
            return self.as_text() == "0"
        return not self.raw

    def as_text(self) -> str:
        if self.is_missing:
            return ""
        return str(self.raw).strip()

    def as_int(self) -> int:
        """
        转换为整数 - Coerce to integer

        文本先去掉除数字和正负号以外的字符，再解析开头的整数，
        无法解析时返回 0。如 "65W" -> 65，"1,000 W" -> 1000，"N/A" -> 0。
        Text drops everything except digits and signs, then the leading
        signed integer is parsed; unparseable text yields 0.
        """
        if self.kind is SpecKind.INT:
            return int(self.raw)
        if self.kind is SpecKind.DECIMAL:
            return int(self.raw) if math.isfinite(self.raw) else 0
        if self.kind is SpecKind.BOOL:
            return 1 if self.raw else 0
        if self.kind is SpecKind.TEXT:
            cleaned = _NON_NUMERIC.sub("", str(self.raw))
            match = _LEADING_INT.match(cleaned)
            return int(match.group(0)) if match else 0
        return 0


MISSING = SpecValue(SpecKind.MISSING)


def lookup(specs: Mapping[str, RawSpecValue], aliases: Sequence[str]) -> SpecValue:
    """按别名顺序查找第一个非空规格值，都没有则返回 MISSING"""
    for key in aliases:
        value = SpecValue.of(specs.get(key))
        if not value.is_missing:
            return value
    return MISSING


# 别名回退链，顺序即优先级 - alias chains, first match wins
SOCKET_KEYS: Tuple[str, ...] = ("socket", "socket_type")
RAM_TYPE_KEYS: Tuple[str, ...] = ("ddr_generation", "type", "memory_type")
BOARD_MEMORY_KEYS: Tuple[str, ...] = ("memory_type", "ram_type")
PSU_WATTAGE_KEYS: Tuple[str, ...] = ("wattage", "power")
TDP_KEYS: Tuple[str, ...] = ("tdp", "power_consumption")
