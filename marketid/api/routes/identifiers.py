"""Identifier Routes — encode text and decode bytes for any identifier kind.

Invariants:
    - Both endpoints answer with IdentifierView (text form, trimmed binary form, bound)
    - Codec failures surface as 400 with the IdentifierError code
    - No database access: the codec is pure
"""

import logging

from fastapi import APIRouter

from marketid.api.routes.route_helpers import resolve_identifier_class
from marketid.schemas.identifiers import (
    DecodeRequest, EncodeRequest, IdentifierView,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/identifiers", tags=["identifiers"])


@router.post("/{kind}/encode", response_model=IdentifierView)
async def encode_identifier(kind: str, body: EncodeRequest):
    """Pack text into an identifier."""
    identifier_cls = resolve_identifier_class(kind)
    identifier = identifier_cls.encode(body.text)
    view = IdentifierView.from_identifier(identifier)
    logger.debug(
        f"Encoded {view.display}",
        extra={"identifier_kind": view.kind.value, "byte_length": view.byte_length},
    )
    return view


@router.post("/{kind}/decode", response_model=IdentifierView)
async def decode_identifier(kind: str, body: DecodeRequest):
    """Rebuild an identifier from its binary form."""
    identifier_cls = resolve_identifier_class(kind)
    identifier = identifier_cls.decode_bytes(bytes.fromhex(body.bytes_hex))
    return IdentifierView.from_identifier(identifier)
