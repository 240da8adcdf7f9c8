"""Константы приложения."""

# Пагинация
DEFAULT_SIBLING_COUNT = 1
DEFAULT_BOUNDARY_COUNT = 1
PAGE_SIZE = 10

# Плейсхолдер номера страницы в шаблоне пути
PAGE_PLACEHOLDER = ":page"
DEFAULT_PATH = "/:page"

# Префикс callback_data для клавиатуры пагинации
DEFAULT_PREFIX = "pg"

# Telegram не показывает больше 8 кнопок в строке
MAX_ROW_WIDTH = 8

# CSS-классы разметки
CSS_ROOT = "pc-pagination"
CSS_INNER = "pc-pagination__inner"
CSS_ITEM = "pc-pagination__item"
CSS_CURRENT = "pc-pagination__item--is-current"
CSS_NOT_CURRENT = "pc-pagination__item--is-not-current"
CSS_SINGLE_BOX = "pc-pagination__item--with-single-box"
CSS_LEFT_BOX = "pc-pagination__item--with-multiple-boxes--left"
CSS_RIGHT_BOX = "pc-pagination__item--with-multiple-boxes--right"
CSS_MIDDLE_BOX = "pc-pagination__item--rounded-catch-all"
CSS_ELLIPSIS = "pc-pagination__item__ellipsis"
CSS_PREVIOUS = "pc-pagination__item__previous"
CSS_PREVIOUS_CHEVRON = "pc-pagination__item__previous__chevron"
CSS_NEXT = "pc-pagination__item__next"
CSS_NEXT_CHEVRON = "pc-pagination__item__next__chevron"
