"""
规格值测试 - Spec Value Tests

测试带标签的规格值、数字清洗规则和别名回退查找。
Test the tagged spec value, digit-stripping coercion and alias fallback lookup.
"""

from decimal import Decimal

import pytest

from rigcheck.specs import (
    MISSING,
    RAM_TYPE_KEYS,
    SOCKET_KEYS,
    SpecKind,
    SpecValue,
    lookup,
)


@pytest.mark.parametrize(
    "raw, kind",
    [
        (None, SpecKind.MISSING),
        ("", SpecKind.MISSING),
        ("   ", SpecKind.MISSING),
        ("AM5", SpecKind.TEXT),
        (65, SpecKind.INT),
        (12.5, SpecKind.DECIMAL),
        (Decimal("99.90"), SpecKind.DECIMAL),
        (True, SpecKind.BOOL),
        (False, SpecKind.BOOL),
    ],
)
def test_spec_value_tags_raw_values(raw, kind):
    assert SpecValue.of(raw).kind is kind


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("65W", 65),
        ("1,000 W", 1000),
        ("65-95W", 65),
        ("-12", -12),
        ("N/A", 0),
        (125, 125),
        (125.9, 125),
        (True, 1),
        (False, 0),
        (None, 0),
        (float("nan"), 0),
    ],
)
def test_as_int_strips_non_numeric_characters(raw, expected):
    assert SpecValue.of(raw).as_int() == expected


def test_as_text_trims_whitespace():
    assert SpecValue.of("  LGA1700 ").as_text() == "LGA1700"
    assert MISSING.as_text() == ""


def test_lookup_uses_first_present_alias():
    specs = {"socket": "AM4", "socket_type": "AM5"}
    assert lookup(specs, SOCKET_KEYS).raw == "AM4"


def test_lookup_skips_blank_and_null_aliases():
    specs = {"ddr_generation": "", "type": None, "memory_type": "DDR4"}
    assert lookup(specs, RAM_TYPE_KEYS).as_text() == "DDR4"


def test_lookup_returns_missing_when_no_alias_matches():
    assert lookup({"cores": 8}, SOCKET_KEYS) is MISSING


@pytest.mark.parametrize(
    "raw, falsy",
    [(None, True), (0, True), ("0", True), (False, True), (0.0, True), ("0W", False), (450, False), ("N/A", False)],
)
def test_is_falsy(raw, falsy):
    assert SpecValue.of(raw).is_falsy is falsy
