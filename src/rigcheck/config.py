from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .db import CatalogRepository
from .service import CompatibilityService

ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalog.json"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    return Path(raw).expanduser()


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name, "").strip().upper()
    if raw in _LOG_LEVELS:
        return raw
    return default


@dataclass
class Settings:
    catalog_path: Path = DEFAULT_CATALOG_PATH
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            catalog_path=_env_path("RIGCHECK_CATALOG_PATH", DEFAULT_CATALOG_PATH),
            log_level=_env_log_level("RIGCHECK_LOG_LEVEL", "INFO"),
        )


def load_settings(env_file: Path | None = None) -> Settings:
    """读取 .env（不覆盖已有环境变量）后构建配置"""
    load_dotenv(env_file or ROOT / ".env")
    return Settings.from_env()


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger("rigcheck").setLevel(settings.log_level)


def create_service(settings: Settings | None = None) -> CompatibilityService:
    settings = settings or load_settings()
    configure_logging(settings)
    return CompatibilityService(CatalogRepository(settings.catalog_path))
