# create_tables.py: только для локальной БД, в боевой таблицы создаёт очередь задач
from db.database import engine
from db.models import Base

if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    print("Таблицы созданы")
