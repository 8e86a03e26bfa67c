# purge_now.py
from apscheduler.schedulers.background import BackgroundScheduler

from core.purge_job import PurgeWorker
from db.database import SessionLocal
from utils.logger import logger

if __name__ == "__main__":
    # Отдельный планировщик, который не запускается: повторная постановка задачи внутри
    # run_manual попадает только в него. Задачу в планировщике бота этот скрипт не трогает,
    # её ставит bot.py при старте.
    worker = PurgeWorker(SessionLocal, BackgroundScheduler(timezone="UTC"))
    rows_deleted = worker.run_manual()
    logger.info("Manual purge finished")
    print(f"{rows_deleted} rows deleted.")
