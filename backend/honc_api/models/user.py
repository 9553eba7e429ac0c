"""User ORM — the only persisted entity.

Invariants:
    - id is an autoincrement integer primary key, assigned by the database
    - name and email are non-nullable; format checks live in schemas/user.py
    - no relationships, no soft-delete, no timestamps

Design Decisions:
    - String columns without length: SQLite (D1) ignores it, Postgres treats as VARCHAR
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from honc_api.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
