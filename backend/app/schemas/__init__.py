"""Pydantic Schemas: form validation and response models for API boundaries.

Invariants:
    - Schemas validate at system boundary (raw form input, API responses)
    - Domain types from core/ used for enum and value fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
