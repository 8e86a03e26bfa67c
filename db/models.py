from sqlalchemy import Column, Integer, BigInteger, String, DateTime, Text
from sqlalchemy.orm import declarative_base

from config import DB_TABLE_PREFIX

Base = declarative_base()

# Статусы действий очереди задач
STATUS_PENDING = "pending"
STATUS_RUNNING = "in-progress"
STATUS_COMPLETE = "complete"
STATUS_FAILED = "failed"
STATUS_CANCELED = "canceled"

# Терминальные статусы: дальше действие обрабатываться не будет
TERMINAL_STATUSES = (STATUS_COMPLETE, STATUS_FAILED)


class ActionRecord(Base):
    __tablename__ = f"{DB_TABLE_PREFIX}actionscheduler_actions"

    action_id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    hook = Column(String(191), nullable=False, index=True)
    status = Column(String(20), nullable=False, index=True)
    scheduled_time = Column("scheduled_date_local", DateTime, nullable=True, index=True)
    args = Column(String(191), nullable=True)
    attempts = Column(Integer, default=0, nullable=False)
    last_attempt_time = Column("last_attempt_local", DateTime, nullable=True)

    def __repr__(self):
        return f"<ActionRecord {self.action_id} {self.hook} {self.status} {self.scheduled_time}>"


class LogRecord(Base):
    __tablename__ = f"{DB_TABLE_PREFIX}actionscheduler_logs"

    log_id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    # связь с действием только по смыслу, внешнего ключа нет
    action_id = Column(BigInteger, nullable=False, index=True)
    message = Column(Text, nullable=False, default="")
    log_time = Column("log_date_local", DateTime, nullable=True, index=True)

    def __repr__(self):
        return f"<LogRecord {self.log_id} action={self.action_id} {self.log_time}>"
