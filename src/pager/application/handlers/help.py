from aiogram import Router, types
from aiogram.filters import Command

router = Router(name="help")


@router.message(Command("help"))
async def cmd_help(message: types.Message):
    """Показать справку по доступным командам."""
    lines: list[str] = [
        "❓ <b>Справка по командам</b>",
        "",
        "  • /pages — открыть список с первой страницы",
        "  • /pages N — открыть список сразу на странице N",
        "  • /help — показать эту справку",
        "",
        "Кнопки с номерами переключают страницы, ⬅️ и ➡️ — на соседнюю страницу.",
        "«…» обозначает пропущенные страницы.",
    ]

    await message.answer("\n".join(lines), parse_mode="HTML")
