"""Route Helpers — shared path-parameter resolution for identifier routes."""

from marketid.core.errors import ResourceNotFoundError
from marketid.core.identifier import PackedIdentifier
from marketid.core.identifier_types import identifier_class


def resolve_identifier_class(kind: str) -> type[PackedIdentifier]:
    """Map the {kind} path segment to its class; unknown kinds are a 404."""
    try:
        return identifier_class(kind)
    except ValueError:
        raise ResourceNotFoundError("Identifier kind", kind)
