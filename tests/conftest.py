from pathlib import Path
from typing import Callable

import pytest

from rigcheck.db import CatalogRepository
from rigcheck.schemas import Component, ComponentSnapshot


ROOT = Path(__file__).resolve().parents[1]
CATALOG_PATH = ROOT / "src" / "rigcheck" / "data" / "catalog.json"


@pytest.fixture
def catalog() -> CatalogRepository:
    """示例配件目录 - Sample component catalog"""
    return CatalogRepository(CATALOG_PATH)


@pytest.fixture
def make_component() -> Callable[..., Component]:
    """配件工厂 - Component factory"""

    def _make(category: str, specs=None, name: str = "", price=None, product_id: str = "") -> Component:
        return Component(
            product_id=product_id or f"{category.upper()}-TEST",
            name=name,
            category=category,
            lowest_price_bdt=price,
            specs=specs or {},
        )

    return _make


@pytest.fixture
def snapshot_of() -> Callable[..., ComponentSnapshot]:
    """按 类别=配件 构建快照 - Build a snapshot from category=component keywords"""

    def _snapshot(**components: Component) -> ComponentSnapshot:
        return ComponentSnapshot(components=components)

    return _snapshot
