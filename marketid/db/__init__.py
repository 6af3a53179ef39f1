"""Database Infrastructure — SQLAlchemy Base and identifier column types.

Invariants:
    - Identifier columns are sized from the identifier class's storage bound
    - All sessions are async (AsyncSession)
"""
