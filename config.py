import os
from dotenv import load_dotenv
from dataclasses import dataclass
load_dotenv(override=True)  # Если используем .env

TELEGRAM_TOKEN = os.getenv("TELEGRAM_TOKEN")
ADMINS = {int(x) for x in os.getenv("ADMINS", "").replace(" ", "").split(",") if x}

DB_DRIVER = os.getenv("DB_DRIVER", "postgresql")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_USER = os.getenv("DB_USER", "postgres")
DB_PASSWORD = os.getenv("DB_PASSWORD", "admin")
DB_NAME = os.getenv("DB_NAME", "task_queue_db")
DATABASE_URL = os.getenv("DATABASE_URL") or f"{DB_DRIVER}://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
DB_TABLE_PREFIX = os.getenv("DB_TABLE_PREFIX", "wp_")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def absint(value) -> int:
    """Приводит значение к неотрицательному целому; мусор превращается в 0."""
    try:
        return abs(int(float(value)))
    except (TypeError, ValueError, OverflowError):
        return 0


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class PurgeConfig:
    max_age_days: int = 7          # удаляем записи старше N дней
    batch_limit: int = 20          # не больше N строк на таблицу за один запуск
    debug: bool = False            # диагностические сообщения в лог
    interval_hours: int = 24       # боевая частота запуска
    debug_interval_hours: int = 1  # частота запуска в режиме отладки


def load_purge_config() -> PurgeConfig:
    # читаем окружение при каждом вызове, без кэша
    return PurgeConfig(
        max_age_days=absint(os.getenv("PURGE_MAX_AGE_DAYS", PurgeConfig.max_age_days)),
        batch_limit=absint(os.getenv("PURGE_BATCH_LIMIT", PurgeConfig.batch_limit)),
        debug=_flag("PURGE_DEBUG"),
        interval_hours=absint(os.getenv("PURGE_INTERVAL_HOURS", PurgeConfig.interval_hours)) or PurgeConfig.interval_hours,
        debug_interval_hours=absint(os.getenv("PURGE_DEBUG_INTERVAL_HOURS", PurgeConfig.debug_interval_hours)) or PurgeConfig.debug_interval_hours,
    )
