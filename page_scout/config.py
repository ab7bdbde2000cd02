# === FILE: page_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации краулера PageScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from page_scout.crawler.urls import normalize_url


class CrawlerConfig(BaseModel):
    """Конфигурация для одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(..., description="Стартовый URL обхода.")
    max_concurrency: int = Field(5, ge=1, description="Макс. число одновременных запросов.")
    max_pages: int = Field(50, ge=1, description="Жесткий лимит по числу страниц.")
    workers: Optional[int] = Field(
        None, ge=1, description="Число обработчиков очереди (по умолчанию 2 * max_concurrency)."
    )
    timeout: float = Field(300.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("PageScoutBot/1.0", min_length=1, description="Заголовок User-Agent.")
    report_path: str = Field("report.csv", min_length=1, description="Путь к CSV-отчёту.")

    @field_validator("base_url", mode="before")
    def _strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("base_url")
    def _check_base_url(cls, v: str) -> str:
        # InvalidURLError is a ValueError, pydantic turns it into ValidationError
        normalize_url(v)
        return v

    @property
    def worker_count(self) -> int:
        return self.workers or 2 * self.max_concurrency


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Читает YAML или JSON файл конфигурации в словарь без валидации."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Читает YAML или JSON (если path задан), накладывает overrides и
    возвращает проверенный объект CrawlerConfig.
    Значения overrides, равные None, не перекрывают значения из файла.
    """
    data = read_config_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**data)
