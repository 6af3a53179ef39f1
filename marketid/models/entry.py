"""Store Entries — one table per identifier layout.

Invariants:
    - sort_key is the full-width comparison_key: case-insensitive for actors, and
      byte order of sort_key == identifier order
    - key keeps the last inserted spelling (actor display case) of the identifier
    - CatalogEntry rows are partitioned by kind: an ItemId and a StoreId with the same
      text are different keys

Design Decisions:
    - Separate actor table: its key column is bounded at 21 bytes, catalog keys at 16
"""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from marketid.core.actor_id import ActorId
from marketid.core.catalog_id import CatalogId
from marketid.db.base import Base
from marketid.db.types import IdentifierBytes


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ActorEntry(Base):
    """Value stored under an ActorId."""
    __tablename__ = "actor_entries"

    sort_key: Mapped[bytes] = mapped_column(
        LargeBinary(ActorId.MAX_LENGTH_IN_BYTES), primary_key=True,
    )
    key: Mapped[ActorId] = mapped_column(IdentifierBytes(ActorId), nullable=False)
    value: Mapped[dict] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now,
    )


class CatalogEntry(Base):
    """Value stored under a catalog-family id (catalog, item, store, market)."""
    __tablename__ = "catalog_entries"

    kind: Mapped[str] = mapped_column(String(16), primary_key=True)
    sort_key: Mapped[bytes] = mapped_column(
        LargeBinary(CatalogId.MAX_LENGTH_IN_BYTES), primary_key=True,
    )
    key: Mapped[CatalogId] = mapped_column(IdentifierBytes(CatalogId), nullable=False)
    value: Mapped[dict] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now,
    )
