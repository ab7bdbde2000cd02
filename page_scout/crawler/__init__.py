"""page_scout.crawler: асинхронный обход сайта с лимитом страниц."""
