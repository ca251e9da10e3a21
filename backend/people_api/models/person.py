"""Person ORM — the single persisted record type.

Invariants:
    - id is an integer primary key assigned by the store (autoincrement)
    - name/age/height are always present
    - name is 24 characters by convention only: the column is unbounded so longer
      names behave the same on SQLite and PostgreSQL (no VARCHAR(24) DataError)
    - Soft-deleted rows (deleted_at set) are never returned by the repository

Design Decisions:
    - Table named "people" (plural of the entity, one table per model)
    - Audit columns come from AuditMixin rather than being declared per model
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from people_api.db.base import AuditMixin, Base


class Person(AuditMixin, Base):
    """Person record — name, age and height keyed by a store-assigned id."""
    __tablename__ = "people"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    height: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Person id={self.id} name={self.name!r}>"
