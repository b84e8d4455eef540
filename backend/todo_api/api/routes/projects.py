"""Projects Routes - list, show, create, update and delete over the projects table.

Invariants:
    - Five fixed paths, one HTTP verb each; any other verb gets 405 from the router
      before a handler (or the store) runs
    - Reads return JSON, writes return a plain-text confirmation with rows affected
    - Zero rows affected on update/delete is a success
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from todo_api.api.dependencies import (
    get_project_repository,
    nonzero_project_id_query,
    project_form,
    project_id_query,
)
from todo_api.core.errors import ErrorContext, ResourceNotFoundError
from todo_api.infrastructure.project_repository import ProjectRepository
from todo_api.schemas.project import (
    ProjectResponse,
    ProjectWrite,
    created_message,
    deleted_message,
    updated_message,
)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    repo: ProjectRepository = Depends(get_project_repository),
):
    """All projects, ascending id."""
    projects = await repo.list_all()
    return [ProjectResponse.model_validate(p) for p in projects]


@router.get("/show", response_model=ProjectResponse)
async def show_project(
    project_id: int = Depends(nonzero_project_id_query),
    repo: ProjectRepository = Depends(get_project_repository),
):
    project = await repo.get(project_id)
    if project is None:
        raise ResourceNotFoundError(
            "Project", project_id, ErrorContext(project_id=project_id),
        )
    return ProjectResponse.model_validate(project)


@router.post("/create", response_class=PlainTextResponse)
async def create_project(
    body: ProjectWrite = Depends(project_form),
    repo: ProjectRepository = Depends(get_project_repository),
):
    """Insert with the caller's id. A duplicate id fails in the store (500)."""
    rows = await repo.create(body.id, body.name, body.description)
    return created_message(body.name, rows)


@router.delete("/delete", response_class=PlainTextResponse)
async def delete_project(
    project_id: int = Depends(project_id_query),
    repo: ProjectRepository = Depends(get_project_repository),
):
    rows = await repo.delete(project_id)
    return deleted_message(project_id, rows)


@router.put("/update", response_class=PlainTextResponse)
async def update_project(
    body: ProjectWrite = Depends(project_form),
    repo: ProjectRepository = Depends(get_project_repository),
):
    """Full replace of name and description."""
    rows = await repo.update(body.id, body.name, body.description)
    return updated_message(body.id, rows)
