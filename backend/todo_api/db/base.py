"""SQLAlchemy Declarative Base - shared base class for all ORM models.

Design Decisions:
    - Separate file for Base: models and alembic/env.py import it without pulling in the app
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass
