"""Project ORM - the only persisted entity.

Invariants:
    - id is caller-supplied; autoincrement disabled so the API never assigns it
    - name is non-nullable, description nullable (schema from the original todo database)
    - columns are addressed by name, never by position
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.db.base import Base

NAME_MAX_LENGTH = 500
DESCRIPTION_MAX_LENGTH = 1000


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False,
    )
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=True,
    )

    def __repr__(self) -> str:
        return f"Project(id={self.id!r}, name={self.name!r})"
