# core/purge.py
import datetime as dt
from dataclasses import dataclass
from typing import Callable, List, Optional
from sqlalchemy.orm import Session

from config import PurgeConfig
from db.models import ActionRecord, LogRecord, TERMINAL_STATUSES

# Больше BIGINT в LIMIT не передать
SQL_MAX_LIMIT = 2 ** 63 - 1


@dataclass(frozen=True)
class PurgeResult:
    actions: int
    logs: int

    @property
    def total(self) -> int:
        return self.actions + self.logs


def utcnow() -> dt.datetime:
    # в таблицах наивные даты, поэтому tzinfo отбрасываем
    return dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)

def cutoff(max_age_days: int = PurgeConfig.max_age_days, now: Optional[dt.datetime] = None) -> dt.datetime:
    now = now or utcnow()
    # слишком большой возраст упирается в datetime.min: удалять нечего
    if max_age_days > (now - dt.datetime.min).days:
        return dt.datetime.min
    return now - dt.timedelta(days=max_age_days)

# --- Удаление порцией ---
def _delete_by_ids(session: Session, model, column, ids: List[int], criteria) -> int:
    """
    Удаляет выбранные id, повторяя условия отбора в самом DELETE:
    строку, которую успели изменить после SELECT, не трогаем.
    """
    if not ids:
        return 0
    q = session.query(model).filter(column.in_(ids), *criteria)
    deleted = q.delete(synchronize_session=False)
    session.commit()
    return deleted

def purge_actions(session: Session, threshold: dt.datetime, limit: int = PurgeConfig.batch_limit) -> int:
    """
    Удаляет не больше `limit` завершённых/упавших действий, запланированных не позже threshold.
    Самые старые уходят первыми.
    """
    if limit <= 0:
        return 0
    criteria = (
        ActionRecord.scheduled_time.isnot(None),
        ActionRecord.scheduled_time <= threshold,
        ActionRecord.status.in_(TERMINAL_STATUSES),
    )
    rows = (
        session.query(ActionRecord.action_id)
        .filter(*criteria)
        .order_by(ActionRecord.scheduled_time.asc(), ActionRecord.action_id.asc())
        .limit(min(limit, SQL_MAX_LIMIT))
        .all()
    )
    return _delete_by_ids(session, ActionRecord, ActionRecord.action_id, [r[0] for r in rows], criteria)

def purge_logs(session: Session, threshold: dt.datetime, limit: int = PurgeConfig.batch_limit) -> int:
    if limit <= 0:
        return 0
    criteria = (LogRecord.log_time.isnot(None), LogRecord.log_time <= threshold)
    rows = (
        session.query(LogRecord.log_id)
        .filter(*criteria)
        .order_by(LogRecord.log_time.asc(), LogRecord.log_id.asc())
        .limit(min(limit, SQL_MAX_LIMIT))
        .all()
    )
    return _delete_by_ids(session, LogRecord, LogRecord.log_id, [r[0] for r in rows], criteria)

def purge(session_factory: Callable[[], Session], threshold: dt.datetime, limit: int = PurgeConfig.batch_limit) -> PurgeResult:
    """
    Две независимые очистки, каждая в своей сессии и транзакции.
    Ошибки БД не перехватываются: если первая упала, вторая не запускается;
    если упала вторая, удалённое первой остаётся удалённым.
    """
    with session_factory() as session:
        actions = purge_actions(session, threshold, limit)
    with session_factory() as session:
        logs = purge_logs(session, threshold, limit)
    return PurgeResult(actions=actions, logs=logs)
