"""Утилиты для работы с диапазонами номеров страниц."""
from collections.abc import Iterable


def clipped_range(start: int, end: int, lower: int, upper: int) -> range:
    """
    Включительный диапазон start..end, обрезанный до границ lower..upper

    :param start: начало диапазона (включительно)
    :param end: конец диапазона (включительно)
    :param lower: нижняя допустимая граница
    :param upper: верхняя допустимая граница
    :return: range, пустой если диапазоны не пересекаются
    """
    return range(max(start, lower), min(end, upper) + 1)


def sorted_union(*ranges: Iterable[int]) -> list[int]:
    """
    Объединение нескольких наборов чисел в отсортированный список без повторов

    :param ranges: наборы чисел
    :return: отсортированный список уникальных значений
    """
    merged: set[int] = set()
    for values in ranges:
        merged.update(values)
    return sorted(merged)
