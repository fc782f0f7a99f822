"""
Workboard Backend: Task SQLAlchemy Model
==========================================

What:  ORM model describing the `tasks` table.

Column notes:
    - assigned_to: free text naming a person. It is NOT a foreign key to
      employees; the two collections are independent.
    - priority / status: free text, no enumerated values enforced
    - deadline: date-valued text, stored as given
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from workboard.database import Base


class Task(Base):
    """A unit of work. Same lifecycle as Employee: create, full overwrite, delete."""

    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    assigned_to: Mapped[str] = mapped_column(Text, nullable=False)
    priority: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False)
    deadline: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, name='{self.name}', status='{self.status}')>"


TASK_FIELDS = ("name", "description", "assigned_to", "priority", "status", "deadline")
