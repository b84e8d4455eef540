"""Core Layer - error types shared by every other layer.

Invariants:
    - core/ never imports from api/, infrastructure/ or models/
"""
