"""Entry Routes — CRUD over the bounded key-value store, one namespace per identifier kind.

Invariants:
    - {key} is parsed with the kind's codec before touching the store
    - PUT answers 201 when the key was absent, 200 when it replaced a value
    - GET/DELETE of an absent key is 404
    - Listing is in ascending identifier order
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from marketid.api.routes.route_helpers import resolve_identifier_class
from marketid.core.errors import ResourceNotFoundError
from marketid.core.identifier import PackedIdentifier
from marketid.infrastructure.database import get_db
from marketid.schemas.entries import EntryView, EntryWrite
from marketid.services.bounded_store import BoundedStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/entries", tags=["entries"])


def _view(key: PackedIdentifier, value: dict) -> EntryView:
    return EntryView(
        kind=key.KIND,
        key=key.to_display_string(),
        key_hex=key.to_bytes().hex(),
        value=value,
    )


@router.get("/{kind}", response_model=list[EntryView])
async def list_entries(kind: str, db: AsyncSession = Depends(get_db)):
    """All entries of a kind, ordered by key."""
    store = BoundedStore(db, resolve_identifier_class(kind))
    return [_view(key, value) for key, value in await store.items()]


@router.get("/{kind}/{key}", response_model=EntryView)
async def get_entry(kind: str, key: str, db: AsyncSession = Depends(get_db)):
    identifier_cls = resolve_identifier_class(kind)
    store = BoundedStore(db, identifier_cls)
    entry = await store.get_entry(identifier_cls.encode(key))
    if entry is None:
        raise ResourceNotFoundError("Entry", key)
    return _view(*entry)


@router.put("/{kind}/{key}", response_model=EntryView)
async def put_entry(
    kind: str, key: str, body: EntryWrite, response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Insert or replace the value stored under key."""
    identifier_cls = resolve_identifier_class(kind)
    identifier = identifier_cls.encode(key)
    previous = await BoundedStore(db, identifier_cls).insert(identifier, body.value)
    response.status_code = (
        status.HTTP_201_CREATED if previous is None else status.HTTP_200_OK
    )
    return _view(identifier, body.value)


@router.delete("/{kind}/{key}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(kind: str, key: str, db: AsyncSession = Depends(get_db)):
    identifier_cls = resolve_identifier_class(kind)
    previous = await BoundedStore(db, identifier_cls).remove(identifier_cls.encode(key))
    if previous is None:
        raise ResourceNotFoundError("Entry", key)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
