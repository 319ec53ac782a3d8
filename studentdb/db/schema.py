# studentdb/db/schema.py

from typing import Dict, List

from sqlalchemy import Column, Integer, MetaData, Table, Text, inspect, text
from sqlalchemy.engine import Engine

metadata = MetaData()

students = Table(
    "students",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", Text, nullable=True),
)

CREATE_STUDENTS_SQL = """
CREATE TABLE IF NOT EXISTS students (
    id INTEGER PRIMARY KEY,
    name TEXT
)
"""


def bootstrap_schema(engine: Engine) -> None:
    """
    Create the students table if it is not there yet.

    Safe to run on every start; errors from the driver propagate.
    """
    with engine.begin() as conn:
        conn.execute(text(CREATE_STUDENTS_SQL))


def describe_students(engine: Engine) -> List[Dict]:
    inspector = inspect(engine)
    return [
        {
            "name": col["name"],
            "type": str(col["type"]),
            "primary_key": bool(col.get("primary_key")),
        }
        for col in inspector.get_columns(students.name)
    ]
