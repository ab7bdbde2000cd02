# cli.py

"""
Точка входа для запуска PageScout из корня репозитория без установки пакета.

Пример запуска:
    python cli.py https://blog.boot.dev 5 50
"""
from page_scout.cli import cli


if __name__ == '__main__':
    cli()
