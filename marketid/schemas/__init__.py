"""Pydantic Schemas — request/response validation and identifier field types.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain types from core/ used for enum and identifier fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
