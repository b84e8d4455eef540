"""API Layer - FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success bodies: JSON for reads, plain text for writes; error bodies: JSON envelope
"""
