# page_scout/report/csv_report.py

"""
Генерация CSV-отчёта для проекта PageScout.

Одна строка на страницу: URL, H1, первый абзац, исходящие ссылки и
изображения (списки склеиваются через ``;``).
"""
import csv
import io
from pathlib import Path
from typing import Iterable, Mapping

from page_scout.crawler.models import PageRecord

HEADERS = ("page_url", "h1", "first_paragraph", "outgoing_link_urls", "image_urls")
LIST_DELIMITER = ";"


def _row(page: PageRecord) -> list[str]:
    return [
        page.url,
        page.h1,
        page.first_paragraph,
        LIST_DELIMITER.join(page.outgoing_links),
        LIST_DELIMITER.join(page.image_urls),
    ]


def render_csv(pages: Iterable[PageRecord]) -> str:
    """
    Возвращает CSV-текст отчёта.

    Поле, содержащее запятую, кавычку или перевод строки, берётся в кавычки,
    а кавычки внутри удваиваются.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(HEADERS)
    for page in pages:
        writer.writerow(_row(page))
    return buffer.getvalue()


def write_csv_report(pages: Mapping[str, PageRecord], output_path: Path | str = "report.csv") -> Path:
    """
    Сохраняет отчёт по словарю страниц в CSV-файл и возвращает его путь.

    Пример:
    ```python
    from page_scout.report.csv_report import write_csv_report
    write_csv_report(pages)  # ./report.csv
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_csv(pages.values()), encoding="utf-8")
    return output
