"""Project Schemas - validated input and serialized output for the projects API.

Invariants:
    - ProjectWrite.id fits a signed 64-bit integer
    - ProjectWrite.name / description are non-empty and within the column bounds
    - ProjectResponse.description is never null ("" when the store holds NULL)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todo_api.models.project import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ProjectWrite(BaseModel):
    """Fields accepted by create and update (full replace)."""
    id: int = Field(ge=INT64_MIN, le=INT64_MAX)
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    description: str = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH)


class ProjectResponse(BaseModel):
    """Public shape of a project row."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def null_description_as_empty(cls, v: str | None) -> str:
        return "" if v is None else v


def created_message(name: str, rows_affected: int) -> str:
    return f'Project "{name}" created successfully ({rows_affected} row affected)'


def updated_message(project_id: int, rows_affected: int) -> str:
    return f"Project {project_id} updated successfully ({rows_affected} row affected)"


def deleted_message(project_id: int, rows_affected: int) -> str:
    return f"Project {project_id} deleted successfully ({rows_affected} row affected)"
