"""Serialization Adapter — text and binary surfaces of an identifier, selected explicitly.

Invariants:
    - TEXT: serialize -> display string; deserialize(str) == cls.encode(str)
    - BINARY: serialize -> to_bytes(); deserialize(bytes) == cls.decode_bytes(bytes)
    - A payload of the wrong type for the mode raises PayloadTypeError, never guesses
    - parse() accepts any surface and is what schema validators use

Design Decisions:
    - Mode is a parameter, not inferred from the target format (ADR: explicit contract)
"""

from typing import TypeVar

from marketid.core.domain_types import SerializationMode
from marketid.core.errors import PayloadTypeError
from marketid.core.identifier import PackedIdentifier


IdentifierT = TypeVar("IdentifierT", bound=PackedIdentifier)

_BYTES_LIKE = (bytes, bytearray, memoryview)


def serialize(identifier: PackedIdentifier, mode: SerializationMode) -> str | bytes:
    if mode is SerializationMode.TEXT:
        return identifier.to_display_string()
    return identifier.to_bytes()


def deserialize(
    cls: type[IdentifierT], payload: object, mode: SerializationMode,
) -> IdentifierT:
    if mode is SerializationMode.TEXT:
        if not isinstance(payload, str):
            raise PayloadTypeError(cls.TYPE_NAME, "text", type(payload).__name__)
        return cls.encode(payload)
    if not isinstance(payload, _BYTES_LIKE):
        raise PayloadTypeError(cls.TYPE_NAME, "binary", type(payload).__name__)
    return cls.decode_bytes(payload)


def parse(cls: type[IdentifierT], value: object) -> IdentifierT:
    """Coerce an instance, a display string or a byte slice into cls."""
    if type(value) is cls:
        return value
    if isinstance(value, str):
        return deserialize(cls, value, SerializationMode.TEXT)
    if isinstance(value, _BYTES_LIKE):
        return deserialize(cls, value, SerializationMode.BINARY)
    raise PayloadTypeError(cls.TYPE_NAME, "text or binary", type(value).__name__)
