"""Route Modules - one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes validate, call the repository once, and serialize; no other logic
"""
