from pager.common.logs import logger
from pager.common.utils.ranges import clipped_range, sorted_union
from pager.domain.entities.constants import DEFAULT_BOUNDARY_COUNT, DEFAULT_SIBLING_COUNT
from pager.domain.entities.items import EllipsisItem, NextItem, PageItem, PaginationItem, PrevItem
from pager.domain.entities.mappings import BoxShape
from pager.domain.services.pagination import PaginationServiceInterface


def _as_int(value) -> int | None:
    """Целое число или None для отсутствующих/некорректных значений."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class PaginationService(PaginationServiceInterface):
    """
    Построение последовательности элементов пагинации

    Всегда показываются первые и последние boundary_count страниц и окно
    из sibling_count соседей вокруг текущей. Пропуск ровно одной страницы
    заменяется самой страницей, пропуск двух и более - многоточием.
    """

    def generate(
        self,
        total_pages: int | None,
        current_page: int | None,
        sibling_count: int = DEFAULT_SIBLING_COUNT,
        boundary_count: int = DEFAULT_BOUNDARY_COUNT,
    ) -> list[PaginationItem]:
        total = _as_int(total_pages)
        current = _as_int(current_page)

        if total is None or current is None or total <= 0:
            logger.debug(f"Нет контекста пагинации: total_pages={total_pages!r}, current_page={current_page!r}")
            return []

        siblings = max(_as_int(sibling_count) or 0, 0)
        boundary = max(_as_int(boundary_count) or 0, 0)

        # prev/next считаются от текущей страницы, приведённой к 1..total
        clamped = max(1, min(current, total))

        numbers = sorted_union(
            clipped_range(1, boundary, 1, total),
            clipped_range(total - boundary + 1, total, 1, total),
            clipped_range(current - siblings, current + siblings, 1, total),
        )

        items: list[PaginationItem] = [PrevItem(target_page=clamped - 1, enabled=clamped > 1)]

        previous: int | None = None
        for number in numbers:
            if previous is not None:
                gap = number - previous - 1
                if gap == 1:
                    items.append(self._page(previous + 1, current, total))
                elif gap > 1:
                    items.append(EllipsisItem())
            items.append(self._page(number, current, total))
            previous = number

        items.append(NextItem(target_page=clamped + 1, enabled=clamped < total))
        return items

    def box_shape(self, item: PageItem) -> BoxShape:
        if item.is_first and item.is_last:
            return BoxShape.SINGLE
        if item.is_first:
            return BoxShape.LEFT
        if item.is_last:
            return BoxShape.RIGHT
        return BoxShape.MIDDLE

    @staticmethod
    def _page(number: int, current: int, total: int) -> PageItem:
        return PageItem(
            number=number,
            is_current=number == current,
            is_first=number == 1,
            is_last=number == total,
        )
