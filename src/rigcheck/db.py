from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Protocol

from pydantic import ValidationError

from .schemas import Component

logger = logging.getLogger(__name__)


class SpecResolver(Protocol):
    def find_by_product_id(self, product_id: str) -> Component | None: ...


def _specs_object(raw_specs: object) -> Dict[str, object]:
    """
    规格展开 - Flatten specs

    规格既可以是键值对象，也可以是 {spec_key, spec_value} 行列表；
    行列表中同名键以后出现的为准。
    Specs may be stored as a key/value object or as a list of
    {spec_key, spec_value} rows; for rows, the last value for a key wins.
    """
    if raw_specs is None:
        return {}
    if isinstance(raw_specs, dict):
        return dict(raw_specs)
    if isinstance(raw_specs, list):
        flattened: Dict[str, object] = {}
        for row in raw_specs:
            if isinstance(row, dict) and row.get("spec_key"):
                flattened[str(row["spec_key"])] = row.get("spec_value")
        return flattened
    raise ValueError(f"unsupported specs format: {type(raw_specs).__name__}")


class CatalogRepository:
    """
    配件目录仓库类 - Component Catalog Repository Class

    从 JSON 文件加载配件及其规格，按 product_id 提供查找，
    作为兼容性评估的规格解析器。
    Loads components and their specs from a JSON file and resolves them by
    product_id; acts as the spec resolver for compatibility evaluation.
    """

    def __init__(self, data_path: Path):
        """
        初始化配件目录 - Initialize catalog

        参数 Parameters:
            data_path: 配件目录 JSON 文件路径
                       Path to the catalog JSON file
        """
        self.data_path = Path(data_path)
        self._components: List[Component] = []
        self._by_id: Dict[str, Component] = {}
        self.reload()

    def reload(self) -> None:
        """
        重新加载配件数据 - Reload catalog data

        格式错误的条目会被跳过并记录警告。
        Malformed entries are skipped with a warning.
        """
        if not self.data_path.exists():
            raise FileNotFoundError(f"component catalog not found: {self.data_path}")
        with self.data_path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, list):
            raise ValueError(f"component catalog must be a JSON list: {self.data_path}")

        components: List[Component] = []
        for index, item in enumerate(raw):
            try:
                if not isinstance(item, dict):
                    raise ValueError("entry is not an object")
                entry = dict(item)
                entry["specs"] = _specs_object(entry.get("specs"))
                components.append(Component.model_validate(entry))
            except (ValidationError, ValueError) as exc:
                logger.warning("Skipping catalog entry #%d in %s: %s", index, self.data_path, exc)

        self._components = components
        self._by_id = {c.product_id: c for c in components}
        logger.info("Loaded %d components from %s", len(components), self.data_path)

    def all_components(self) -> List[Component]:
        """
        获取所有配件 - Get all components

        返回 Returns:
            所有配件列表
            List of all components
        """
        return self._components

    def by_category(self, category: str) -> List[Component]:
        """
        按类别获取配件 - Get components by category

        参数 Parameters:
            category: 配件类别，如 "cpu", "gpu", "ram" 等
                      Component category, such as "cpu", "gpu", "ram", etc.
        """
        return [c for c in self._components if c.category == category]

    def find_by_product_id(self, product_id: str) -> Component | None:
        return self._by_id.get(product_id)
