"""Core Layer — the identifier codec: pure, no IO, no async, no DB, no logging.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, db/ or schemas/
    - All functions are pure and deterministic; values produced are immutable

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
