"""Services Layer — imperative shell around the identifier codec.

Invariants:
    - Services own IO (database) and logging; core/ stays pure
"""
