"""Pydantic Schemas: request/response contracts for the HTTP boundary.

Design Decisions:
    - Separate from models: schemas are API contracts (camelCase), models are persistence (snake_case)
"""
