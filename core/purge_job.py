# core/purge_job.py
import datetime as dt
import logging
from typing import Callable, Optional, Tuple

from sqlalchemy.orm import Session
from apscheduler.schedulers.base import BaseScheduler

from config import PurgeConfig, absint, load_purge_config
from core.purge import PurgeResult, cutoff, purge, utcnow
from core.purge_schedule import PurgeSchedule

logger = logging.getLogger(__name__)

# Хук получает текущее значение и возвращает (возможно) изменённое
PolicyFilter = Callable[[int], int]


class PurgeWorker:
    """
    Очистка старых действий и логов очереди задач.

    Периодический запуск идёт через `run_periodic` (результат отбрасывается),
    ручной через `run_manual` (возвращает число удалённых строк).
    Обе точки входа сводятся к одной функции `core.purge.purge`.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        scheduler: BaseScheduler,
        config_loader: Callable[[], PurgeConfig] = load_purge_config,
        min_age_filter: Optional[PolicyFilter] = None,
        query_limit_filter: Optional[PolicyFilter] = None,
        clock: Optional[Callable[[], dt.datetime]] = None,
    ):
        self.session_factory = session_factory
        self.config_loader = config_loader
        self.min_age_filter = min_age_filter
        self.query_limit_filter = query_limit_filter
        self.clock = clock or utcnow
        self.schedule = PurgeSchedule(scheduler, self.run_periodic, config_loader)

    def install(self) -> bool:
        return self.schedule.install()

    def uninstall(self) -> None:
        self.schedule.uninstall()

    def resolve_policy(self) -> Tuple[int, int, PurgeConfig]:
        config = self.config_loader()
        max_age_days = config.max_age_days
        batch_limit = config.batch_limit
        if self.min_age_filter is not None:
            max_age_days = self.min_age_filter(max_age_days)
        if self.query_limit_filter is not None:
            batch_limit = self.query_limit_filter(batch_limit)
        return absint(max_age_days), absint(batch_limit), config

    def _run(self) -> Tuple[PurgeResult, PurgeConfig]:
        # если задача потерялась в планировщике, ставим её заново
        self.schedule.arm()

        max_age_days, batch_limit, config = self.resolve_policy()
        threshold = cutoff(max_age_days, now=self.clock())
        result = purge(self.session_factory, threshold, batch_limit)

        if config.debug:
            logger.info(f"Actions rows deleted: {result.actions}, logs rows deleted {result.logs}.")
        return result, config

    def run_periodic(self) -> None:
        self._run()

    def run_manual(self) -> int:
        result, config = self._run()
        if config.debug:
            logger.info(f"Task queue actions/logs rows deleted: {result.total}")
        return result.total
