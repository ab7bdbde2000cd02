"""page_scout.parser: извлечение данных страницы из HTML."""
