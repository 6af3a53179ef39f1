"""Bounded Store — async key-value map keyed by one identifier class.

Invariants:
    - Keys must be exactly key_cls (KeyTypeMismatchError otherwise)
    - Lookup is by comparison_key: keys equal as identifiers address the same entry
    - insert/remove return the previous value (None when absent), like a map
    - items()/keys() iterate in ascending identifier order
    - Every mutation commits before returning

Design Decisions:
    - Shell over core: identifiers are built and compared in core/, this module only
      maps them onto rows (ADR: ExMA impureim sandwich)
    - One service class for every kind; the table is picked from the key layout
"""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketid.core.actor_id import ActorId
from marketid.core.errors import KeyTypeMismatchError
from marketid.core.identifier import PackedIdentifier
from marketid.models.entry import ActorEntry, CatalogEntry

logger = logging.getLogger(__name__)

KeyT = TypeVar("KeyT", bound=PackedIdentifier)


class BoundedStore(Generic[KeyT]):
    """Persistent map from identifier to JSON document."""

    def __init__(self, db: AsyncSession, key_cls: type[KeyT]):
        self.db = db
        self.key_cls = key_cls
        self._model = ActorEntry if issubclass(key_cls, ActorId) else CatalogEntry

    # ─── Reads ───────────────────────────────────────────────

    async def get(self, key: KeyT) -> dict[str, Any] | None:
        row = await self._load(key)
        return row.value if row else None

    async def get_entry(self, key: KeyT) -> tuple[KeyT, dict[str, Any]] | None:
        """Stored key (as last spelled on insert) and its value."""
        row = await self._load(key)
        if row is None:
            return None
        return self._restore_key(row), row.value

    async def contains_key(self, key: KeyT) -> bool:
        return await self._load(key) is not None

    async def items(self) -> list[tuple[KeyT, dict[str, Any]]]:
        stmt = self._scoped(select(self._model)).order_by(self._model.sort_key)
        result = await self.db.execute(stmt)
        return [(self._restore_key(row), row.value) for row in result.scalars()]

    async def keys(self) -> list[KeyT]:
        return [key for key, _ in await self.items()]

    async def count(self) -> int:
        stmt = self._scoped(select(func.count()).select_from(self._model))
        result = await self.db.execute(stmt)
        return result.scalar_one()

    # ─── Writes ──────────────────────────────────────────────

    async def insert(self, key: KeyT, value: dict[str, Any]) -> dict[str, Any] | None:
        """Store value under key; returns the replaced value, if any."""
        row = await self._load(key)
        previous = None
        if row is None:
            row = self._model(sort_key=key.comparison_key, key=key, value=value)
            if self._model is CatalogEntry:
                row.kind = self.key_cls.KIND.value
            self.db.add(row)
        else:
            previous = row.value
            row.key = key
            row.value = value
        await self.db.commit()
        logger.info(
            f"Stored entry {key}",
            extra={
                "identifier_kind": self.key_cls.KIND.value,
                "byte_length": len(key.to_bytes()),
            },
        )
        return previous

    async def remove(self, key: KeyT) -> dict[str, Any] | None:
        row = await self._load(key)
        if row is None:
            return None
        previous = row.value
        await self.db.delete(row)
        await self.db.commit()
        logger.info(
            f"Removed entry {key}",
            extra={"identifier_kind": self.key_cls.KIND.value},
        )
        return previous

    # ─── Internals ───────────────────────────────────────────

    def _check_key(self, key: object) -> None:
        if type(key) is not self.key_cls:
            raise KeyTypeMismatchError(self.key_cls.__name__, type(key).__name__)

    def _scoped(self, stmt):
        if self._model is CatalogEntry:
            return stmt.where(CatalogEntry.kind == self.key_cls.KIND.value)
        return stmt

    async def _load(self, key: KeyT):
        self._check_key(key)
        stmt = self._scoped(
            select(self._model).where(self._model.sort_key == key.comparison_key),
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    def _restore_key(self, row) -> KeyT:
        return self.key_cls.from_trusted_bytes(row.key.to_bytes())
