"""
Виджет пагинации в виде HTML-разметки.
"""
from collections.abc import Callable, Mapping
from html import escape

from pager.application.services.pagination import PaginationService
from pager.common.utils.links import LinkBuilder, build_link
from pager.domain.entities import constants as css
from pager.domain.entities.constants import DEFAULT_BOUNDARY_COUNT, DEFAULT_PATH, DEFAULT_SIBLING_COUNT
from pager.domain.entities.items import EllipsisItem, NextItem, PageItem, PaginationItem, PrevItem
from pager.domain.entities.mappings import BoxShape, ItemKind
from pager.domain.services.pagination import PaginationServiceInterface

PageHandler = Callable[[int], str]
EllipsisHandler = Callable[[], str]

_SHAPE_CLASSES = {
    BoxShape.SINGLE: css.CSS_SINGLE_BOX,
    BoxShape.LEFT: css.CSS_LEFT_BOX,
    BoxShape.RIGHT: css.CSS_RIGHT_BOX,
    BoxShape.MIDDLE: css.CSS_MIDDLE_BOX,
}


def build_class(classes: list[str]) -> str:
    """
    Склейка CSS-классов через пробел

    :param classes: список классов, пустые строки пропускаются
    :return: строка для атрибута class
    """
    return " ".join(c.strip() for c in classes if c and c.strip())


def build_attrs(attrs: Mapping[str, str | int | bool | None]) -> str:
    """
    Сериализация дополнительных HTML-атрибутов

    :param attrs: имя атрибута -> значение; True даёт атрибут без значения,
        False и None атрибут пропускают
    :return: строка атрибутов с ведущим пробелом или пустая строка
    """
    parts: list[str] = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {escape(name)}")
        else:
            parts.append(f' {escape(name)}="{escape(str(value))}"')
    return "".join(parts)


class HtmlPaginationRenderer:
    """
    Виджет для отрисовки пагинации в HTML

    Для каждого вида элемента можно передать собственный обработчик
    (prev, page, next, ellipsis); без обработчика используется разметка
    по умолчанию со ссылками по шаблону path.
    """

    def __init__(
        self,
        *,
        path: str | LinkBuilder = DEFAULT_PATH,
        class_: str = "",
        attrs: Mapping[str, str | int | bool | None] | None = None,
        sibling_count: int = DEFAULT_SIBLING_COUNT,
        boundary_count: int = DEFAULT_BOUNDARY_COUNT,
        prev: PageHandler | None = None,
        page: PageHandler | None = None,
        next: PageHandler | None = None,
        ellipsis: EllipsisHandler | None = None,
        service: PaginationServiceInterface | None = None,
    ):
        """
        Инициализация виджета

        :param path: шаблон пути с ":page" или функция номер -> ссылка
        :param class_: дополнительный CSS-класс корневого div
        :param attrs: дополнительные атрибуты корневого div
        :param sibling_count: соседей текущей страницы с каждой стороны
        :param boundary_count: страниц, всегда видимых в начале и в конце
        :param prev: своя разметка кнопки «назад», получает номер целевой страницы
        :param page: своя разметка страницы (кроме текущей), получает номер страницы
        :param next: своя разметка кнопки «вперёд», получает номер целевой страницы
        :param ellipsis: своя разметка многоточия
        :param service: сервис построения элементов
        :raises PathTemplateError: если в шаблоне path нет ":page"
        """
        self.link = build_link(path)
        self.class_ = class_
        self.attrs = dict(attrs or {})
        self.sibling_count = sibling_count
        self.boundary_count = boundary_count
        self.service = service or PaginationService()
        self._handlers: dict[ItemKind, Callable[[PaginationItem], str]] = {
            ItemKind.PREV: self._render_prev,
            ItemKind.NEXT: self._render_next,
            ItemKind.PAGE: self._render_page,
            ItemKind.ELLIPSIS: self._render_ellipsis,
        }
        self._custom_prev = prev
        self._custom_page = page
        self._custom_next = next
        self._custom_ellipsis = ellipsis

    def render(self, total_pages: int | None, current_page: int | None) -> str:
        """
        Отрисовка пагинации

        :param total_pages: всего страниц
        :param current_page: текущая страница
        :return: HTML-разметка; при отсутствии страниц - пустой список ul
        """
        items = self.service.generate(total_pages, current_page, self.sibling_count, self.boundary_count)
        return self.render_items(items)

    def render_items(self, items: list[PaginationItem]) -> str:
        """Отрисовка готовой последовательности элементов."""
        root_class = escape(build_class([self.class_, css.CSS_ROOT]))
        attrs = build_attrs({k: v for k, v in self.attrs.items() if k != "class"})

        lines = [f'<div class="{root_class}"{attrs}>', f'<ul class="{css.CSS_INNER}">']
        for item in items:
            rendered = self._handlers[item.kind](item)
            if rendered:
                lines.append(rendered)
        lines.append("</ul>")
        lines.append("</div>")
        return "\n".join(lines)

    def box_class(self, item: PageItem) -> str:
        """
        CSS-классы «коробки» страницы

        :param item: элемент страницы
        :return: базовый класс, класс текущей/нетекущей страницы и класс скругления
        """
        active = css.CSS_CURRENT if item.is_current else css.CSS_NOT_CURRENT
        return build_class([css.CSS_ITEM, active, _SHAPE_CLASSES[self.service.box_shape(item)]])

    # ------------------------------------------------------------------------
    # Разметка по видам элементов
    # ------------------------------------------------------------------------

    def _render_prev(self, item: PrevItem) -> str:
        if not item.enabled:
            return ""
        if self._custom_prev:
            return f"<div>{self._custom_prev(item.target_page)}</div>"
        return (
            f'<div><a href="{self._href(item.target_page)}" class="{css.CSS_PREVIOUS}">'
            f'<span class="{css.CSS_PREVIOUS_CHEVRON}" aria-hidden="true">&lsaquo;</span></a></div>'
        )

    def _render_next(self, item: NextItem) -> str:
        if not item.enabled:
            return ""
        if self._custom_next:
            return f"<div>{self._custom_next(item.target_page)}</div>"
        return (
            f'<div><a href="{self._href(item.target_page)}" class="{css.CSS_NEXT}">'
            f'<span class="{css.CSS_NEXT_CHEVRON}" aria-hidden="true">&rsaquo;</span></a></div>'
        )

    def _render_page(self, item: PageItem) -> str:
        # текущая страница - не ссылка и не переопределяется
        if item.is_current:
            return f'<li><span class="{self.box_class(item)}">{item.number}</span></li>'
        if self._custom_page:
            return f"<li>{self._custom_page(item.number)}</li>"
        return f'<li><a href="{self._href(item.number)}" class="{self.box_class(item)}">{item.number}</a></li>'

    def _render_ellipsis(self, item: EllipsisItem) -> str:
        if self._custom_ellipsis:
            return f"<li>{self._custom_ellipsis()}</li>"
        return f'<li><span class="{css.CSS_ELLIPSIS}">...</span></li>'

    def _href(self, page_number: int) -> str:
        return escape(self.link(page_number))
