"""Pydantic Schemas - request/response contracts for the projects endpoints.

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
