import pager.application.handlers.help as help
import pager.application.handlers.pages as pages
import pager.application.handlers.start as start
from aiogram import Bot, Dispatcher
from aiogram.types import BotCommand, BotCommandScopeDefault


def get_user_commands() -> list[BotCommand]:
    return [
        BotCommand(command="pages", description="Открыть список постранично"),
        BotCommand(command="help", description="Показать справку по командам"),
    ]


async def set_bot_commands(bot: Bot):
    """Устанавливает команды бота в меню"""
    await bot.set_my_commands(get_user_commands(), scope=BotCommandScopeDefault())


def setup_handlers(dp: Dispatcher):
    setup_base(dp)


def setup_base(dp: Dispatcher):
    dp.include_router(start.router)
    dp.include_router(help.router)
    dp.include_router(pages.router)
