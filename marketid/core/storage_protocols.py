"""Storage Protocols — the contract a key type offers a bounded-size store.

Invariants:
    - BOUND.max_size_bytes is an upper bound on len(to_bytes())
    - from_trusted_bytes(to_bytes()) reconstructs an equal value with the same display form
    - is_fixed_size is False for identifiers: trimmed encodings vary in length

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy (ADR: ExMA anti-pattern)
    - Storage engine sizes slots from BOUND alone, no length prefix stored
"""

from dataclasses import dataclass
from typing import ClassVar, Protocol, Self, runtime_checkable

from marketid.core.errors import StorageBoundExceededError


@dataclass(frozen=True)
class StorageBound:
    """Maximum encoded size a key type declares to the store."""
    max_size_bytes: int
    is_fixed_size: bool = False


@runtime_checkable
class Storable(Protocol):
    """Structural contract for bounded-store keys, implemented by every identifier."""
    TYPE_NAME: ClassVar[str]
    BOUND: ClassVar[StorageBound]

    def to_bytes(self) -> bytes: ...

    @classmethod
    def from_trusted_bytes(cls, raw: bytes) -> Self: ...


def check_bound(type_name: str, raw: bytes, bound: StorageBound) -> bytes:
    """Return raw unchanged if it fits the bound, else raise StorageBoundExceededError."""
    if len(raw) > bound.max_size_bytes:
        raise StorageBoundExceededError(type_name, len(raw), bound.max_size_bytes)
    return raw
