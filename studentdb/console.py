# studentdb/console.py
"""
Interactive shell over a live students database.

Kept apart from startup so that scripts and tests can run everything up to
the handoff and then skip or replace it.
"""

from typing import Any, Dict

from IPython import embed
from sqlalchemy import select
from sqlalchemy.engine import Engine

from studentdb.db.schema import students
from studentdb.models.students import Student
from studentdb.repository import StudentRepository

BANNER = """students console

  students        StudentRepository  (create, find, find_by, where, all,
                                      first, last, count, exists, update,
                                      delete, delete_all)
  Student         entity model
  students_table  SQLAlchemy Table
  engine          open SQLAlchemy engine

SQL is echoed to stdout. Exit with Ctrl-D or exit().
"""


def build_namespace(engine: Engine, repository: StudentRepository) -> Dict[str, Any]:
    return {
        "Student": Student,
        "students": repository,
        "students_table": students,
        "engine": engine,
        "select": select,
    }


def enter_interactive(namespace: Dict[str, Any], header: str = BANNER) -> None:
    """Block in an IPython shell until the operator leaves it."""
    embed(header=header, user_ns=namespace)
