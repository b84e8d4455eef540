"""Project Repository - one parameterized statement per operation against the projects table.

Invariants:
    - Each write commits its own statement; nothing spans two statements
    - Any SQLAlchemyError rolls the session back and is re-raised as DatabaseError
    - Writes report rows affected; zero is a valid outcome, not an error
    - Rows come back as Project ORM objects (named-column mapping)
"""

import logging
from collections.abc import Sequence
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.errors import DatabaseError, ErrorContext
from todo_api.models.project import Project

logger = logging.getLogger(__name__)

# Writes go through Core so rowcount comes straight from the driver cursor
projects_table = Project.__table__


class ProjectRepository:
    """Persistence adapter for Project rows, bound to one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _translate_errors(
        self, operation: str, project_id: int | None = None,
    ) -> AsyncIterator[None]:
        try:
            yield
        except IntegrityError as e:
            await self._db.rollback()
            logger.error(
                f"DB integrity error during {operation}: {e}",
                extra={"operation": operation, "project_id": project_id},
            )
            raise DatabaseError(
                "Integrity constraint violated", operation,
                ErrorContext(project_id=project_id),
            ) from e
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"DB error during {operation}: {e}",
                extra={"operation": operation, "project_id": project_id},
            )
            raise DatabaseError(
                "Database operation failed", operation,
                ErrorContext(project_id=project_id),
            ) from e

    async def list_all(self) -> Sequence[Project]:
        """All projects ordered by ascending id."""
        async with self._translate_errors("list"):
            result = await self._db.execute(
                select(Project).order_by(Project.id.asc()),
            )
            return result.scalars().all()

    async def get(self, project_id: int) -> Project | None:
        async with self._translate_errors("get", project_id):
            result = await self._db.execute(
                select(Project).where(Project.id == project_id),
            )
            return result.scalar_one_or_none()

    async def create(
        self, project_id: int, name: str, description: str,
    ) -> int:
        """Insert a row with the caller-chosen id. Returns rows affected."""
        async with self._translate_errors("insert", project_id):
            result = await self._db.execute(
                insert(projects_table).values(
                    id=project_id, name=name, description=description,
                ),
            )
            await self._db.commit()
        return self._rows_affected(result, "insert", project_id)

    async def update(
        self, project_id: int, name: str, description: str,
    ) -> int:
        """Replace name and description. Returns rows affected (0 if id is unknown)."""
        async with self._translate_errors("update", project_id):
            result = await self._db.execute(
                update(projects_table)
                .where(projects_table.c.id == project_id)
                .values(name=name, description=description),
            )
            await self._db.commit()
        return self._rows_affected(result, "update", project_id)

    async def delete(self, project_id: int) -> int:
        """Delete by id. Returns rows affected (0 if id is unknown)."""
        async with self._translate_errors("delete", project_id):
            result = await self._db.execute(
                delete(projects_table).where(projects_table.c.id == project_id),
            )
            await self._db.commit()
        return self._rows_affected(result, "delete", project_id)

    @staticmethod
    def _rows_affected(result, operation: str, project_id: int) -> int:
        # Some drivers report -1 when the count is unavailable
        rows = result.rowcount
        if rows is None or rows < 0:
            raise DatabaseError(
                "Rows affected unavailable", operation,
                ErrorContext(project_id=project_id),
            )
        logger.info(
            f"Project {operation} affected {rows} row(s)",
            extra={
                "operation": operation,
                "project_id": project_id,
                "rows_affected": rows,
            },
        )
        return rows
