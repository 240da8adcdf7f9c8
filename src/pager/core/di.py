from aiogram import Bot
from dishka import AsyncContainer, Provider, Scope, provide
from dishka import make_async_container

from pager.application.services.formatter import PageViewFormatter
from pager.application.services.pagination import PaginationService
from pager.application.widgets.keyboard import PaginationKeyboard
from pager.core.config import BotConfig, PaginationConfig
from pager.domain.services.pagination import PaginationServiceInterface


class ConfigProvider(Provider):
    @provide(scope=Scope.APP)
    def get_bot_config(self) -> BotConfig:
        return BotConfig()

    @provide(scope=Scope.APP)
    def get_pagination_config(self) -> PaginationConfig:
        return PaginationConfig()


class InfrastructureProvider(Provider):
    @provide(scope=Scope.APP)
    def get_bot(self, config: BotConfig) -> Bot:
        return Bot(token=config.TOKEN.get_secret_value())


class ServiceProvider(Provider):
    @provide(scope=Scope.APP)
    def get_pagination_service(self) -> PaginationServiceInterface:
        return PaginationService()

    @provide(scope=Scope.REQUEST)
    def get_page_view_formatter(self, keyboard: PaginationKeyboard, config: PaginationConfig) -> PageViewFormatter:
        return PageViewFormatter(keyboard, page_size=config.PAGE_SIZE, items_total=config.DEMO_ITEMS_TOTAL)


class WidgetProvider(Provider):
    """Провайдер UI-виджетов"""

    @provide(scope=Scope.REQUEST)
    def get_pagination_keyboard(
        self,
        service: PaginationServiceInterface,
        config: PaginationConfig,
    ) -> PaginationKeyboard:
        """
        Предоставляет экземпляр клавиатуры пагинации

        :return: PaginationKeyboard с параметрами окна из конфигурации
        """
        return PaginationKeyboard(
            sibling_count=config.SIBLING_COUNT,
            boundary_count=config.BOUNDARY_COUNT,
            row_width=config.ROW_WIDTH,
            service=service,
        )


def create_container() -> AsyncContainer:
    return make_async_container(
        ConfigProvider(),
        InfrastructureProvider(),
        ServiceProvider(),
        WidgetProvider(),
    )
