from apscheduler.schedulers.asyncio import AsyncIOScheduler

from core.purge_job import PurgeWorker
from db.database import SessionLocal


def start_scheduler() -> AsyncIOScheduler:
    scheduler = AsyncIOScheduler(timezone="UTC")
    scheduler.start()
    return scheduler


def install_purge_job(scheduler: AsyncIOScheduler) -> PurgeWorker:
    # Очистка старых действий и логов очереди задач (частота из PURGE_INTERVAL_HOURS)
    worker = PurgeWorker(SessionLocal, scheduler)
    worker.install()
    return worker
