"""Projects CRUD API over a single relational table."""

__version__ = "1.0.0"
