"""ORM Models - SQLAlchemy declarative models.

All models imported here so Base.metadata is complete for create_all and alembic.
"""

from todo_api.models.project import Project  # noqa: F401
