# File: page_scout/report/__init__.py
"""page_scout.report: генерация отчётов (CSV, JSON и HTML), используемая CLI и тестами."""

from page_scout.report.csv_report import render_csv, write_csv_report
from page_scout.report.html_report import render_html
from page_scout.report.json_report import render_json

__all__ = ["render_csv", "write_csv_report", "render_json", "render_html"]
