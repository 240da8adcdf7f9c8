from abc import ABC, abstractmethod

from pager.domain.entities.constants import DEFAULT_BOUNDARY_COUNT, DEFAULT_SIBLING_COUNT
from pager.domain.entities.items import PageItem, PaginationItem
from pager.domain.entities.mappings import BoxShape


class PaginationServiceInterface(ABC):
    """Интерфейс сервиса построения элементов пагинации"""

    @abstractmethod
    def generate(
        self,
        total_pages: int | None,
        current_page: int | None,
        sibling_count: int = DEFAULT_SIBLING_COUNT,
        boundary_count: int = DEFAULT_BOUNDARY_COUNT,
    ) -> list[PaginationItem]:
        """
        Построить последовательность элементов пагинации

        :param total_pages: всего страниц (None - пагинации нет)
        :param current_page: текущая страница, начиная с 1 (None - пагинации нет)
        :param sibling_count: сколько соседних страниц показывать с каждой стороны от текущей
        :param boundary_count: сколько страниц всегда показывать в начале и в конце
        :return: упорядоченный список элементов: prev, страницы и пропуски, next
        """
        raise NotImplementedError

    @abstractmethod
    def box_shape(self, item: PageItem) -> BoxShape:
        """
        Форма «коробки» страницы для отрисовки

        :param item: элемент страницы
        :return: форма, зависящая только от флагов is_first/is_last
        """
        raise NotImplementedError
