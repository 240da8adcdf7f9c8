import asyncio

from aiogram import Bot, Dispatcher
from aiogram.fsm.storage.memory import MemoryStorage
from dishka.integrations.aiogram import setup_dishka

from pager.application.handlers.base import setup_handlers, set_bot_commands
from pager.common.logs import logger
from pager.core.di import create_container


async def main():
    logger.info("🚀 Запуск бота...")

    # Создаем DI контейнер
    container = create_container()

    try:
        bot = await container.get(Bot)
        dp = Dispatcher(storage=MemoryStorage())

        # Настраиваем dishka для автоматического внедрения зависимостей в handlers
        setup_dishka(container, dp)

        # Регистрируем обработчики
        setup_handlers(dp)
        logger.info("✅ Handlers зарегистрированы")

        await set_bot_commands(bot)
        logger.info("✅ Команды бота установлены")

        logger.info("✅ Бот готов к работе!")
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        # Закрываем контейнер
        await container.close()
        logger.info("👋 Бот остановлен")


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("👋 Получен сигнал остановки. Завершаем работу бота...")


if __name__ == "__main__":
    run()
