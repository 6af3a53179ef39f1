"""Infrastructure Layer — database session management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports codec logic from core/ beyond error types
    - All SQLAlchemy failures mapped to DatabaseError
"""
