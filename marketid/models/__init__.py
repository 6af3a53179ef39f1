"""ORM Models — SQLAlchemy declarative models for the bounded key-value store.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rows are keyed by an identifier's comparison_key, never by its raw bytes

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all runs
      (ADR: standard SQLAlchemy pattern)
"""

from marketid.models.entry import ActorEntry, CatalogEntry  # noqa: F401
