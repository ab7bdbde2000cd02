#!/usr/bin/env python3
"""
Точка входа для запуска краулера PageScout через командную строку.

Аргументы:
  BASE_URL            Стартовый URL (обязательный)
  MAX_CONCURRENCY     Макс. число одновременных запросов (default: 5)
  MAX_PAGES           Макс. число страниц в отчёте (default: 50)

Опции:
  --config PATH       YAML/JSON-конфиг; аргументы командной строки важнее
  --json PATH         Дополнительно сохранить JSON-отчёт
  --html PATH         Дополнительно сохранить HTML-отчёт
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования
  --version, -v       Показать версию PageScout

CSV-отчёт всегда пишется в report.csv в текущей директории.

Пример:
  page-scout https://blog.boot.dev 3 25 --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click

from page_scout import __version__
from page_scout.config import load_config
from page_scout.engine import crawl_site
from page_scout.logger import init_logging
from page_scout.report.csv_report import write_csv_report
from page_scout.report.html_report import render_html
from page_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PageScout, version %(version)s')
@click.argument('base_url')
@click.argument('max_concurrency', required=False, type=click.IntRange(min=1))
@click.argument('max_pages', required=False, type=click.IntRange(min=1))
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
def cli(base_url, max_concurrency, max_pages, config_path, json_output, html_output,
        log_level, log_file, log_format):
    """Обойти сайт начиная с BASE_URL и записать отчёт в report.csv."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(
            config_path,
            base_url=base_url,
            max_concurrency=max_concurrency,
            max_pages=max_pages,
        )
    except Exception as e:
        print_error(f'Ошибка конфигурации: {e}')

    click.echo(f'Starting crawler at base URL: {cfg.base_url}')
    click.echo(f'Max concurrency: {cfg.max_concurrency}')
    click.echo(f'Max pages: {cfg.max_pages}')

    try:
        pages = asyncio.run(crawl_site(cfg))
    except KeyboardInterrupt:
        print_error('Обход прерван пользователем')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    try:
        saved_csv = write_csv_report(pages, cfg.report_path)
        click.echo(f'CSV report written to {saved_csv}')
    except OSError as e:
        print_error(f'Ошибка при сохранении CSV: {e}')

    if json_output:
        try:
            saved_json = render_json(pages, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(pages, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


if __name__ == "__main__":
    cli()
