"""
Workboard Backend: Employee SQLAlchemy Model
==============================================

What:  ORM model describing the `employees` table.
How:   Inherits from the shared DeclarativeBase; ResourceRepository reads
       Employee.__table__ to build its statements and to create the table.

Table Design:
    - Integer primary key with AUTOINCREMENT on SQLite, so identifiers are
      assigned by storage in increasing order and never reused after a delete
    - Every other column is TEXT NOT NULL; the NOT NULL declarations are the
      only validation the service performs
    - joining_date is date-valued text (e.g. "2020-01-01"), stored as given
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from workboard.database import Base


class Employee(Base):
    """A staff member record. Rows are fully overwritten on update."""

    __tablename__ = "employees"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    joining_date: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, name='{self.name}')>"


# Writable columns, in statement order
EMPLOYEE_FIELDS = ("name", "email", "phone", "address", "joining_date")
