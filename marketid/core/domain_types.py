"""Domain Types — enums shared by the codec, the store, and the API.

Invariants:
    - Every identifier class is named by exactly one IdentifierKind
    - Serialization surfaces are chosen explicitly via SerializationMode, never inferred

Design Decisions:
    - str Enums: serialize to JSON and appear in URL paths without custom encoders
"""

from enum import Enum


class IdentifierKind(str, Enum):
    """Identifier types — maps to URL segments and store table discriminators."""
    ACTOR = "actor"
    CATALOG = "catalog"
    ITEM = "item"
    STORE = "store"
    MARKET = "market"


class SerializationMode(str, Enum):
    """The two serialization surfaces of an identifier."""
    TEXT = "text"      # canonical display string
    BINARY = "binary"  # trimmed raw bytes
