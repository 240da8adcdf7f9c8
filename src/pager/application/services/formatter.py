from aiogram.types import InlineKeyboardMarkup

from pager.application.widgets.keyboard import PaginationKeyboard
from pager.common.utils.pagination import Page, paginate


class PageViewFormatter:
    """Форматтер сообщения со страницей демонстрационного списка."""

    def __init__(self, keyboard: PaginationKeyboard, page_size: int, items_total: int):
        self.keyboard = keyboard
        self.page_size = page_size
        self.entries = [f"Запись №{i}" for i in range(1, items_total + 1)]

    def build_page(self, page: int) -> Page[str]:
        return paginate(self.entries, page, self.page_size)

    @staticmethod
    def build_text(p: Page[str]) -> str:
        # Пример:
        # 📄 Страница 2 из 10
        #
        # 11. Запись №11
        # 12. Запись №12
        lines: list[str] = [f"📄 Страница <b>{p.page}</b> из <b>{p.total_pages}</b>", ""]
        if not p.items:
            lines.append("Список пуст")
        for offset, entry in enumerate(p.items, start=p.start_index + 1):
            lines.append(f"{offset}. {entry}")
        return "\n".join(lines)

    def build_view(self, page: int) -> tuple[str, InlineKeyboardMarkup]:
        """
        Текст и клавиатура для страницы списка

        :param page: запрошенная страница (приводится к допустимому диапазону)
        :return: кортеж (HTML-текст сообщения, клавиатура пагинации)
        """
        p = self.build_page(page)
        return self.build_text(p), self.keyboard.build_keyboard(p.total_pages, p.page)
