# studentdb/repository.py
"""
Generic persistence for Student rows.

The entity stays a plain model; everything that talks to the database goes
through a StudentRepository built around an engine.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Engine

from studentdb.db.schema import students
from studentdb.models.students import Student

logger = logging.getLogger(__name__)


class StudentDBError(Exception):
    pass


class RecordNotFound(StudentDBError, LookupError):
    def __init__(self, student_id: int):
        super().__init__(f"Couldn't find Student with id={student_id}")
        self.student_id = student_id


class UnknownAttribute(StudentDBError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"unknown attribute {name!r} for Student")
        self.name = name


class ReadOnlyAttribute(StudentDBError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"attribute {name!r} is assigned by the store and cannot be changed")
        self.name = name


def _row_to_student(row) -> Student:
    return Student(id=row["id"], name=row["name"])


class StudentRepository:
    """Create/read/update/delete operations on the students table."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def _conditions(self, filters: Dict[str, Any]) -> list:
        conditions = []
        for key, value in filters.items():
            if key not in students.c:
                raise UnknownAttribute(key)
            # == None compiles to IS NULL
            conditions.append(students.c[key] == value)
        return conditions

    def _fetch(self, conn, student_id: int) -> Optional[Student]:
        stmt = select(students.c.id, students.c.name).where(students.c.id == student_id)
        row = conn.execute(stmt).mappings().first()
        return _row_to_student(row) if row is not None else None

    # ---- reads ----

    def find(self, student_id: int) -> Student:
        with self.engine.connect() as conn:
            student = self._fetch(conn, student_id)
        if student is None:
            raise RecordNotFound(student_id)
        return student

    def find_by(self, **filters: Any) -> Optional[Student]:
        stmt = (
            select(students.c.id, students.c.name)
            .where(*self._conditions(filters))
            .order_by(students.c.id)
            .limit(1)
        )
        with self.engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return _row_to_student(row) if row is not None else None

    def where(self, **filters: Any) -> List[Student]:
        stmt = (
            select(students.c.id, students.c.name)
            .where(*self._conditions(filters))
            .order_by(students.c.id)
        )
        with self.engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [_row_to_student(row) for row in rows]

    def all(self, limit: Optional[int] = None, offset: int = 0) -> List[Student]:
        stmt = select(students.c.id, students.c.name).order_by(students.c.id)
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        with self.engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [_row_to_student(row) for row in rows]

    def first(self) -> Optional[Student]:
        stmt = select(students.c.id, students.c.name).order_by(students.c.id.asc()).limit(1)
        with self.engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return _row_to_student(row) if row is not None else None

    def last(self) -> Optional[Student]:
        stmt = select(students.c.id, students.c.name).order_by(students.c.id.desc()).limit(1)
        with self.engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return _row_to_student(row) if row is not None else None

    def count(self) -> int:
        with self.engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(students)).scalar_one()

    def exists(self, student_id: int) -> bool:
        stmt = select(func.count()).select_from(students).where(students.c.id == student_id)
        with self.engine.connect() as conn:
            return conn.execute(stmt).scalar_one() > 0

    # ---- writes ----

    def create(self, name: Optional[str] = None, id: Optional[int] = None) -> Student:
        values: Dict[str, Any] = {"name": name}
        if id is not None:
            values["id"] = id

        with self.engine.begin() as conn:
            result = conn.execute(insert(students).values(**values))
            student_id = result.inserted_primary_key[0]
            student = self._fetch(conn, student_id)

        logger.debug("Created student %s", student_id)
        return student

    def update(self, student_id: int, **values: Any) -> Student:
        if "id" in values:
            raise ReadOnlyAttribute("id")
        for key in values:
            if key not in students.c:
                raise UnknownAttribute(key)

        with self.engine.begin() as conn:
            if values:
                result = conn.execute(
                    update(students).where(students.c.id == student_id).values(**values)
                )
                if result.rowcount == 0:
                    raise RecordNotFound(student_id)
            student = self._fetch(conn, student_id)

        if student is None:
            raise RecordNotFound(student_id)
        return student

    def delete(self, student_id: int) -> Student:
        with self.engine.begin() as conn:
            student = self._fetch(conn, student_id)
            if student is None:
                raise RecordNotFound(student_id)
            conn.execute(delete(students).where(students.c.id == student_id))

        logger.debug("Deleted student %s", student_id)
        return student

    def delete_all(self) -> int:
        with self.engine.begin() as conn:
            return conn.execute(delete(students)).rowcount
