"""Identifier Column Type — persists identifiers in their trimmed binary form.

Invariants:
    - Column length == identifier_cls.BOUND.max_size_bytes
    - Bind rejects encodings larger than the bound (StorageBoundExceededError)
    - Load goes through from_trusted_bytes: stored rows were validated on the way in
    - Change detection compares full encodings (case bitmap included), so a re-spelled
      actor key is written back

Design Decisions:
    - TypeDecorator over manual to_bytes()/from_bytes at each call site: the ORM hands
      back identifier values, never raw bytes (ADR: rich types over primitives)
"""

from sqlalchemy import LargeBinary
from sqlalchemy.types import TypeDecorator

from marketid.core.storage_protocols import Storable, check_bound


class IdentifierBytes(TypeDecorator):
    """LargeBinary column bounded by a Storable class's declared storage bound."""

    impl = LargeBinary
    cache_ok = True

    def __init__(self, identifier_cls: type[Storable]):
        super().__init__(length=identifier_cls.BOUND.max_size_bytes)
        self.identifier_cls = identifier_cls

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, self.identifier_cls):
            raise TypeError(
                f"{self.identifier_cls.__name__} column got {type(value).__name__}",
            )
        return check_bound(value.TYPE_NAME, value.to_bytes(), self.identifier_cls.BOUND)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return self.identifier_cls.from_trusted_bytes(value)

    def compare_values(self, x, y):
        # Identifier equality ignores the case bitmap; change detection must not.
        if x is None or y is None:
            return x is y
        return x.to_bytes() == y.to_bytes()
