"""Infrastructure Layer - database access and logging.

Invariants:
    - Infrastructure never imports from api/
    - Every SQLAlchemy failure leaves this layer as core.errors.DatabaseError
"""
