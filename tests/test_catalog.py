"""
配件目录测试 - Component Catalog Tests
"""

import json
import logging

import pytest

from rigcheck.db import CatalogRepository


def test_catalog_loads_sample_components(catalog):
    assert len(catalog.all_components()) == 18
    assert {c.product_id for c in catalog.by_category("psu")} == {
        "PSU-650",
        "PSU-450",
        "PSU-NOLABEL",
    }


def test_find_by_product_id(catalog):
    cpu = catalog.find_by_product_id("CPU-R5-7600")
    assert cpu is not None
    assert cpu.spec("socket").as_text() == "AM5"
    assert catalog.find_by_product_id("CPU-UNKNOWN") is None


def test_spec_rows_are_flattened(catalog):
    board = catalog.find_by_product_id("MB-B550")
    assert board.specs == {"socket": "AM4", "form_factor": "ATX"}


def test_later_spec_rows_win(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {
                    "product_id": "PSU-1",
                    "category": "psu",
                    "specs": [
                        {"spec_key": "wattage", "spec_value": "550W"},
                        {"spec_key": "wattage", "spec_value": "750W"},
                        {"spec_value": "orphan"},
                    ],
                }
            ]
        ),
        encoding="utf-8",
    )
    repo = CatalogRepository(path)
    assert repo.find_by_product_id("PSU-1").specs == {"wattage": "750W"}


def test_malformed_entries_are_skipped(tmp_path, caplog):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {"product_id": "CPU-1", "category": "cpu", "specs": {"socket": "AM5"}},
                {"product_id": "X-1", "category": "monitor"},
                {"category": "gpu"},
                {"product_id": "RAM-1", "category": "ram", "specs": "DDR5"},
                "not-an-object",
            ]
        ),
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING, logger="rigcheck.db"):
        repo = CatalogRepository(path)

    assert [c.product_id for c in repo.all_components()] == ["CPU-1"]
    assert sum("Skipping catalog entry" in r.message for r in caplog.records) == 4


def test_missing_catalog_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CatalogRepository(tmp_path / "missing.json")


def test_non_list_catalog_raises(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"components": []}), encoding="utf-8")
    with pytest.raises(ValueError):
        CatalogRepository(path)
