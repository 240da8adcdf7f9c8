from aiogram import F, Router, types
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import Command, CommandObject
from dishka import FromDishka
from dishka.integrations.aiogram import inject

from pager.application.services.formatter import PageViewFormatter
from pager.common.logs import logger
from pager.domain.entities.constants import DEFAULT_PREFIX

router = Router(name="pages")


def parse_page_arg(args: str | None) -> int:
    """
    Номер страницы из аргумента команды /pages

    :param args: текст после команды
    :return: номер страницы, 1 если аргумент не задан или некорректен
    """
    if not args:
        return 1
    value = args.strip().split()[0]
    return int(value) if value.isdecimal() else 1


@router.message(Command("pages"))
@inject
async def cmd_pages(
    message: types.Message,
    command: CommandObject,
    formatter: FromDishka[PageViewFormatter],
):
    """Показать страницу демонстрационного списка с клавиатурой пагинации."""
    text, kb = formatter.build_view(parse_page_arg(command.args))
    await message.answer(text, parse_mode="HTML", reply_markup=kb)


@router.callback_query(F.data.startswith(f"{DEFAULT_PREFIX}:"))
@inject
async def cb_page(
    cq: types.CallbackQuery,
    formatter: FromDishka[PageViewFormatter],
):
    """Переход на другую страницу по кнопке клавиатуры."""
    page, action = formatter.keyboard.handle_callback(cq.data)
    if action == "noop":
        await cq.answer()
        return

    text, kb = formatter.build_view(page)
    logger.debug(f"Переход на страницу {page} (user={cq.from_user.id})")
    try:
        await cq.message.edit_text(text, parse_mode="HTML", reply_markup=kb)
    except TelegramBadRequest as e:
        if "message is not modified" not in str(e).lower():
            raise
    await cq.answer()
