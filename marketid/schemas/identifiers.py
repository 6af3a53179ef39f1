"""Identifier Schemas — pydantic field types and API views for identifiers.

Invariants:
    - *IdField types validate an instance, a display string, or a byte slice
    - JSON dumps always emit the display string
    - Python dumps emit the display string unless context={"identifier_mode": "binary"}
    - IdentifierView.bytes_hex is the trimmed binary form

Design Decisions:
    - Annotated validator/serializer pairs over core-level pydantic hooks: core/ stays
      free of third-party imports (ADR: DDD boundary)
"""

from typing import Annotated

from pydantic import (
    BaseModel, Field, PlainSerializer, PlainValidator, SerializationInfo,
    WithJsonSchema, field_validator,
)

from marketid.core.actor_id import ActorId
from marketid.core.catalog_id import CatalogId, ItemId, MarketId, StoreId
from marketid.core.domain_types import IdentifierKind, SerializationMode
from marketid.core.identifier import PackedIdentifier
from marketid.core.serialization import parse, serialize


IDENTIFIER_MODE_KEY = "identifier_mode"


def _serialize_identifier(value: PackedIdentifier, info: SerializationInfo) -> str | bytes:
    if info.mode_is_json():
        return serialize(value, SerializationMode.TEXT)
    context = info.context or {}
    mode = SerializationMode(context.get(IDENTIFIER_MODE_KEY, SerializationMode.TEXT))
    return serialize(value, mode)


def _identifier_field(cls: type[PackedIdentifier]):
    return Annotated[
        cls,
        PlainValidator(lambda value: parse(cls, value)),
        PlainSerializer(_serialize_identifier),
        WithJsonSchema({
            "type": "string",
            "minLength": cls.MIN_LENGTH,
            "maxLength": cls.MAX_LENGTH,
        }),
    ]


ActorIdField = _identifier_field(ActorId)
CatalogIdField = _identifier_field(CatalogId)
ItemIdField = _identifier_field(ItemId)
StoreIdField = _identifier_field(StoreId)
MarketIdField = _identifier_field(MarketId)


class EncodeRequest(BaseModel):
    """Text to pack; identifier-level validation happens in the codec."""
    text: str = Field(max_length=256)


class DecodeRequest(BaseModel):
    """Hex of a trimmed binary identifier."""
    bytes_hex: str = Field(max_length=128)

    @field_validator("bytes_hex")
    @classmethod
    def check_hex(cls, v: str) -> str:
        v = v.strip()
        try:
            bytes.fromhex(v)
        except ValueError:
            raise ValueError("bytes_hex must be an even-length hex string")
        return v


class IdentifierView(BaseModel):
    """Identifier response — both surfaces plus the storage bound."""
    kind: IdentifierKind
    display: str
    bytes_hex: str
    byte_length: int
    max_size_bytes: int
    is_fixed_size: bool

    @classmethod
    def from_identifier(cls, identifier: PackedIdentifier) -> "IdentifierView":
        raw = identifier.to_bytes()
        return cls(
            kind=identifier.KIND,
            display=identifier.to_display_string(),
            bytes_hex=raw.hex(),
            byte_length=len(raw),
            max_size_bytes=identifier.BOUND.max_size_bytes,
            is_fixed_size=identifier.BOUND.is_fixed_size,
        )
