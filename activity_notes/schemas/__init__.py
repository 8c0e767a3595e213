"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape and size at the system boundary
    - Business rules (required fields, allow-list) stay in core/

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
