from aiogram import Router, types
from aiogram.filters import CommandStart

router = Router(name="start")


@router.message(CommandStart())
async def cmd_start(message: types.Message):
    name = message.from_user.first_name if message.from_user else None

    welcome_text = (
        f"\n👋 <b>Привет{', ' + name if name else ''}!</b>\n\n"
        "Я показываю длинные списки постранично.\n"
        "Нажми <b>/pages</b>, чтобы открыть демонстрационный список."
    )

    await message.answer(welcome_text, parse_mode="HTML")
