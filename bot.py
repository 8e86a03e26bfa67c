import asyncio
from aiogram import Bot, Dispatcher
from config import TELEGRAM_TOKEN
from handlers import register_all_handlers
from aiogram.enums.parse_mode import ParseMode
from aiogram.client.default import DefaultBotProperties
from aiogram.types import BotCommand


from utils.logger import logger

from core.scheduler import start_scheduler, install_purge_job

async def set_commands(bot: Bot):
    commands = [
        BotCommand(command="/purge_logs", description="Удалить старые действия и логи очереди задач"),
    ]
    await bot.set_my_commands(commands)

async def main():
    bot = Bot(
        token=TELEGRAM_TOKEN,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML)
    )
    dp = Dispatcher()

    # Регистрируем все хендлеры
    register_all_handlers(dp)

    # Запускаем планировщик и ставим задачу очистки
    scheduler = start_scheduler()
    dp["purge_worker"] = install_purge_job(scheduler)
    logger.info("Purge job installed")

    # Устанавливаем команды бота
    await set_commands(bot)

    try:
        # Запускаем поллинг (опрос)
        await dp.start_polling(bot)
    finally:
        dp["purge_worker"].uninstall()
        scheduler.shutdown(wait=False)
        logger.info("Purge job uninstalled")

if __name__ == "__main__":
    asyncio.run(main())
