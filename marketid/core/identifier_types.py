"""Identifier Registry — IdentifierKind -> identifier class.

Invariants:
    - Every IdentifierKind has exactly one class; every class's KIND points back to it
"""

from marketid.core.actor_id import ActorId
from marketid.core.catalog_id import CatalogId, ItemId, MarketId, StoreId
from marketid.core.domain_types import IdentifierKind
from marketid.core.identifier import PackedIdentifier


IDENTIFIER_TYPES: dict[IdentifierKind, type[PackedIdentifier]] = {
    cls.KIND: cls for cls in (ActorId, CatalogId, ItemId, StoreId, MarketId)
}


def identifier_class(kind: IdentifierKind | str) -> type[PackedIdentifier]:
    """Resolve a kind (or its string value). Raises ValueError for unknown kinds."""
    return IDENTIFIER_TYPES[IdentifierKind(kind)]
