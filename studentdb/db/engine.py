# studentdb/db/engine.py

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

DB_PATH = Path("db/students.sqlite")  # relative to the working directory
DB_URL = f"sqlite:///{DB_PATH.as_posix()}"


def get_engine(db_url: str = DB_URL) -> Engine:
    # SQL echo is handled by studentdb.db.sql_log, not echo=True
    return create_engine(db_url, future=True)
