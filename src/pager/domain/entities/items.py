from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from pager.domain.entities.mappings import ItemKind


class ItemBaseEntity(BaseModel):
    model_config = ConfigDict(frozen=True)


class PrevItem(ItemBaseEntity):
    kind: Literal[ItemKind.PREV] = ItemKind.PREV
    target_page: int = Field(description="Номер предыдущей страницы")
    enabled: bool = Field(description="Можно ли перейти назад")


class NextItem(ItemBaseEntity):
    kind: Literal[ItemKind.NEXT] = ItemKind.NEXT
    target_page: int = Field(description="Номер следующей страницы")
    enabled: bool = Field(description="Можно ли перейти вперёд")


class PageItem(ItemBaseEntity):
    kind: Literal[ItemKind.PAGE] = ItemKind.PAGE
    number: int = Field(description="Номер страницы, начиная с 1")
    is_current: bool = Field(default=False, description="Текущая страница")
    is_first: bool = Field(default=False, description="Первая страница (номер 1)")
    is_last: bool = Field(default=False, description="Последняя страница (номер total_pages)")


class EllipsisItem(ItemBaseEntity):
    """Пропуск нескольких страниц. Номера не имеет и не кликабелен."""

    kind: Literal[ItemKind.ELLIPSIS] = ItemKind.ELLIPSIS


PaginationItem = Annotated[
    Union[PrevItem, NextItem, PageItem, EllipsisItem],
    Field(discriminator="kind"),
]
