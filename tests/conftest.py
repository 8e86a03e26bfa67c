"""
Pytest configuration and fixtures for purge tests.
"""

import datetime as dt

import pytest
from apscheduler.schedulers.background import BackgroundScheduler
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config import PurgeConfig
from db.models import ActionRecord, Base, LogRecord


NOW = dt.datetime(2025, 8, 20, 12, 0, 0)


@pytest.fixture
def engine():
    """In-memory SQLite shared across sessions of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def scheduler():
    """Started but paused scheduler, so registered jobs never fire during tests."""
    scheduler = BackgroundScheduler(timezone="UTC")
    scheduler.start(paused=True)
    yield scheduler
    scheduler.shutdown(wait=False)


@pytest.fixture
def purge_config():
    return PurgeConfig(max_age_days=7, batch_limit=20, debug=False)


@pytest.fixture
def add_action(session):
    """Insert an action scheduled `days_ago` days before NOW."""

    def _add(status="complete", days_ago=10, hook="woocommerce_cleanup", **kwargs):
        action = ActionRecord(
            hook=hook,
            status=status,
            scheduled_time=NOW - dt.timedelta(days=days_ago, **kwargs),
        )
        session.add(action)
        session.commit()
        return action.action_id

    return _add


@pytest.fixture
def add_log(session):
    """Insert a log entry written `days_ago` days before NOW."""

    def _add(days_ago=10, action_id=1, message="action complete", **kwargs):
        log = LogRecord(
            action_id=action_id,
            message=message,
            log_time=NOW - dt.timedelta(days=days_ago, **kwargs),
        )
        session.add(log)
        session.commit()
        return log.log_id

    return _add
