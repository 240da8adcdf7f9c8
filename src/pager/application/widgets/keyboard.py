"""
Виджет пагинации для inline-клавиатуры Telegram.
"""
from typing import Literal

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from pager.application.services.pagination import PaginationService
from pager.domain.entities.constants import (
    DEFAULT_BOUNDARY_COUNT,
    DEFAULT_PREFIX,
    DEFAULT_SIBLING_COUNT,
    MAX_ROW_WIDTH,
)
from pager.domain.entities.items import EllipsisItem, NextItem, PageItem, PaginationItem, PrevItem
from pager.domain.services.pagination import PaginationServiceInterface


class PaginationKeyboard:
    """
    Виджет для навигации по страницам через inline-клавиатуру Telegram

    Номера страниц и многоточия выводятся строками по row_width кнопок,
    под ними - строка с кнопками «назад»/«вперёд».
    """

    def __init__(
        self,
        *,
        prefix: str = DEFAULT_PREFIX,
        sibling_count: int = DEFAULT_SIBLING_COUNT,
        boundary_count: int = DEFAULT_BOUNDARY_COUNT,
        row_width: int = MAX_ROW_WIDTH,
        service: PaginationServiceInterface | None = None,
    ):
        """
        Инициализация виджета

        :param prefix: префикс для callback_data (для избежания конфликтов)
        :param sibling_count: соседей текущей страницы с каждой стороны
        :param boundary_count: страниц, всегда видимых в начале и в конце
        :param row_width: максимум кнопок в строке (Telegram допускает до 8)
        :param service: сервис построения элементов
        """
        self.prefix = prefix
        self.sibling_count = sibling_count
        self.boundary_count = boundary_count
        self.row_width = max(1, min(row_width, MAX_ROW_WIDTH))
        self.service = service or PaginationService()

    def build_keyboard(self, total_pages: int | None, current_page: int | None) -> InlineKeyboardMarkup:
        """
        Построение клавиатуры пагинации

        :param total_pages: всего страниц
        :param current_page: текущая страница
        :return: inline-клавиатура; пустая, если страниц нет

        Структура клавиатуры:
        [1] […] [4] [· 5 ·] [6] […] [10]
        [⬅️] [➡️]
        """
        items = self.service.generate(total_pages, current_page, self.sibling_count, self.boundary_count)
        return self.build_from_items(items)

    def build_from_items(self, items: list[PaginationItem]) -> InlineKeyboardMarkup:
        kb = InlineKeyboardBuilder()

        pages: list[InlineKeyboardButton] = []
        nav: list[InlineKeyboardButton] = []
        for item in items:
            if isinstance(item, PrevItem):
                if item.enabled:
                    nav.insert(0, InlineKeyboardButton(text="⬅️", callback_data=self.page_data(item.target_page)))
            elif isinstance(item, NextItem):
                if item.enabled:
                    nav.append(InlineKeyboardButton(text="➡️", callback_data=self.page_data(item.target_page)))
            elif isinstance(item, PageItem):
                pages.append(self._page_button(item))
            elif isinstance(item, EllipsisItem):
                pages.append(InlineKeyboardButton(text="…", callback_data=self.nop_data))

        # Страницы строками по row_width
        for i in range(0, len(pages), self.row_width):
            kb.row(*pages[i: i + self.row_width])

        # Навигация
        if nav:
            kb.row(*nav)

        return kb.as_markup()

    def page_data(self, page_number: int) -> str:
        """callback_data перехода на страницу."""
        return f"{self.prefix}:{page_number}"

    @property
    def nop_data(self) -> str:
        """callback_data кнопок, которые никуда не ведут."""
        return f"{self.prefix}:nop"

    def handle_callback(self, callback_data: str | None) -> tuple[int | None, Literal["goto", "noop"]]:
        """
        Обработка callback от кнопок пагинации

        :param callback_data: данные callback от Telegram
        :return: кортеж (номер_страницы, действие)

        Возможные действия:
        - "goto": перейти на указанную страницу
        - "noop": текущая страница, многоточие или чужой callback
        """
        if not callback_data or not callback_data.startswith(f"{self.prefix}:"):
            return None, "noop"

        value = callback_data.split(":", 1)[1]
        if not value.isdecimal():
            return None, "noop"

        page = int(value)
        if page < 1:
            return None, "noop"
        return page, "goto"

    def _page_button(self, item: PageItem) -> InlineKeyboardButton:
        if item.is_current:
            return InlineKeyboardButton(text=f"· {item.number} ·", callback_data=self.nop_data)
        return InlineKeyboardButton(text=str(item.number), callback_data=self.page_data(item.number))
