# studentdb/models/students.py

from typing import Optional

from pydantic import BaseModel


class Student(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None

    class Config:
        from_attributes = True
