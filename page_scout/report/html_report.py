# File: page_scout/report/html_report.py
"""page_scout.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from jinja2 import BaseLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from page_scout.crawler.models import PageRecord

TEMPLATE_NAME = "report.html.j2"


def render_html(
    pages: Mapping[str, PageRecord],
    output_path: Union[Path, str],
    template_dir: Optional[Union[Path, str]] = None,
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        pages: словарь нормализованный URL -> PageRecord.
        output_path: путь к итоговому HTML-файлу.
        template_dir: директория со своим ``report.html.j2``; по умолчанию
            используется шаблон из пакета.

    Returns:
        Path до сохранённого HTML-файла.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    loader: BaseLoader
    if template_dir is not None:
        loader = FileSystemLoader(str(template_dir))
    else:
        loader = PackageLoader("page_scout", "templates")
    env = Environment(loader=loader, autoescape=select_autoescape(["html", "xml", "j2"]))
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = {
        "pages": sorted(pages.values(), key=lambda p: p.url),
        "total": len(pages),
    }

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
