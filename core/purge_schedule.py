# core/purge_schedule.py
import datetime as dt
import logging
from typing import Callable

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.base import BaseScheduler

from config import PurgeConfig

logger = logging.getLogger(__name__)

# Зарезервированное имя задачи в планировщике
JOB_ID = "purge_old_task_logs"


class PurgeSchedule:
    """
    Регистрирует периодическую задачу очистки в планировщике хоста.
    В планировщике всегда не больше одной задачи с именем JOB_ID.

    Частота запуска берётся из конфигурации один раз, при создании;
    флаг отладки для диагностики перечитывается при каждом вызове.
    """

    def __init__(self, scheduler: BaseScheduler, func: Callable, config_loader: Callable[[], PurgeConfig]):
        self.scheduler = scheduler
        self.func = func
        self.config_loader = config_loader
        self.config = config_loader()

    @property
    def interval_hours(self) -> int:
        return self.config.debug_interval_hours if self.config.debug else self.config.interval_hours

    def is_armed(self) -> bool:
        return self.scheduler.get_job(JOB_ID) is not None

    def arm(self) -> bool:
        """Ставит задачу, если её ещё нет. Ошибки планировщика наружу не выпускает."""
        if self.is_armed():
            return True

        hours = self.interval_hours
        debug = self.config_loader().debug
        try:
            self.scheduler.add_job(
                self.func,
                "interval",
                hours=hours,
                id=JOB_ID,
                name=JOB_ID,
                next_run_time=dt.datetime.now(dt.timezone.utc),  # первый запуск сразу
                max_instances=1,
                coalesce=True,
                replace_existing=False,
            )
        except Exception as e:
            # повторим при следующем запуске воркера
            if debug:
                logger.error(f'Error scheduling "{JOB_ID}" to run every {hours}h: {e}')
            return False

        if debug:
            logger.info(f'Schedule "{JOB_ID}" to run every {hours}h.')
        return True

    def disarm(self) -> None:
        try:
            self.scheduler.remove_job(JOB_ID)
        except JobLookupError:
            pass

    def install(self) -> bool:
        self.disarm()
        return self.arm()

    def uninstall(self) -> None:
        self.disarm()
