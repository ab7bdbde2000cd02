# page_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта PageScout.

Сериализация словаря страниц в файл.
"""
import json
from pathlib import Path
from typing import Mapping

from page_scout.crawler.models import PageRecord


def render_json(pages: Mapping[str, PageRecord], output_path: Path | str) -> Path:
    """
    Сохраняет страницы в формате JSON по указанному пути.

    :param pages: словарь нормализованный URL -> PageRecord
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = {key: page.as_dict() for key, page in pages.items()}

    # Запись в файл с отступами и Unicode
    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
