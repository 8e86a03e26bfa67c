import asyncio

from aiogram import types, Dispatcher
from aiogram.filters import Command

from config import ADMINS
from core.purge_job import PurgeWorker


async def cmd_purge_logs(message: types.Message, purge_worker: PurgeWorker):
    """ Ручной запуск очистки: удаляет порцию старых действий и логов и показывает результат """
    if message.from_user.id not in ADMINS:
        await message.answer("У вас нет доступа к этой команде.")
        return

    loop = asyncio.get_running_loop()
    rows_deleted = await loop.run_in_executor(None, purge_worker.run_manual)

    await message.answer(f"<pre>{rows_deleted} rows deleted.</pre>", parse_mode="HTML")

def register_purge_handler(dp: Dispatcher):
    dp.message.register(cmd_purge_logs, Command("purge_logs"))
