"""Request Dependencies - parameter parsing and repository wiring for the projects routes.

Invariants:
    - Query/form fields use the wire names ID, Name, Description
    - ID is a base-10 signed 64-bit integer: optional sign then ASCII digits only
      ("10.0", "1_0", " 10" are rejected, not coerced)
    - Parse failures surface as 400 (RequestValidationError or InvalidParameterError)
    - Nothing here touches the store except get_project_repository handing out the session
"""

from fastapi import Depends, Form, Query
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.errors import InvalidParameterError
from todo_api.infrastructure.database import get_db
from todo_api.infrastructure.project_repository import ProjectRepository
from todo_api.models.project import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH
from todo_api.schemas.project import INT64_MAX, INT64_MIN, ProjectWrite

ID_PATTERN = r"^[+-]?[0-9]+$"


async def get_project_repository(
    db: AsyncSession = Depends(get_db),
) -> ProjectRepository:
    return ProjectRepository(db)


def parse_int64(raw: str, field: str = "ID") -> int:
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidParameterError(f"{field} is out of 64-bit integer range", field)
    return value


def project_id_query(
    raw_id: str = Query(alias="ID", pattern=ID_PATTERN),
) -> int:
    return parse_int64(raw_id)


def nonzero_project_id_query(
    project_id: int = Depends(project_id_query),
) -> int:
    """Show treats ID=0 like a missing ID."""
    if project_id == 0:
        raise InvalidParameterError("ID must be a nonzero integer", "ID")
    return project_id


def project_form(
    raw_id: str = Form(alias="ID", pattern=ID_PATTERN),
    name: str = Form(alias="Name", min_length=1, max_length=NAME_MAX_LENGTH),
    description: str = Form(
        alias="Description", min_length=1, max_length=DESCRIPTION_MAX_LENGTH,
    ),
) -> ProjectWrite:
    return ProjectWrite(id=parse_int64(raw_id), name=name, description=description)
