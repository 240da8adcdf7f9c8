"""Утилиты построения ссылок на страницы."""
from collections.abc import Callable

from pager.domain.entities.constants import PAGE_PLACEHOLDER
from pager.domain.entities.items import NextItem, PageItem, PaginationItem, PrevItem

LinkBuilder = Callable[[int], str]


class PathTemplateError(ValueError):
    """Шаблон пути не содержит плейсхолдер номера страницы."""


def build_link(target: str | LinkBuilder) -> LinkBuilder:
    """
    Построение функции «номер страницы -> ссылка»

    :param target: шаблон пути с плейсхолдером ":page" (например, "/posts/:page")
        или готовая функция от номера страницы
    :return: функция, возвращающая ссылку для номера страницы
    :raises PathTemplateError: если в шаблоне нет плейсхолдера
    """
    if callable(target):
        return target

    if PAGE_PLACEHOLDER not in target:
        raise PathTemplateError(f"В шаблоне пути {target!r} нет плейсхолдера {PAGE_PLACEHOLDER!r}")

    def link(page_number: int) -> str:
        return target.replace(PAGE_PLACEHOLDER, str(page_number))

    return link


def resolve_target(link: LinkBuilder, item: PaginationItem) -> str | None:
    """
    Ссылка для элемента пагинации

    :param link: функция построения ссылки
    :param item: элемент пагинации
    :return: ссылка; None для многоточия
    """
    if isinstance(item, (PrevItem, NextItem)):
        return link(item.target_page)
    if isinstance(item, PageItem):
        return link(item.number)
    return None
