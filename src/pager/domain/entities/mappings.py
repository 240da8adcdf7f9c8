from enum import StrEnum


class ItemKind(StrEnum):
    PREV = "prev"
    NEXT = "next"
    PAGE = "page"
    ELLIPSIS = "ellipsis"


class BoxShape(StrEnum):
    SINGLE = "single"  # единственная страница
    LEFT = "left"  # первая из нескольких
    RIGHT = "right"  # последняя из нескольких
    MIDDLE = "middle"
