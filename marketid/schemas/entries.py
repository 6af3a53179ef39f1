"""Entry Schemas — request/response shapes for the bounded key-value store.

Invariants:
    - EntryView.key is the display string of the stored key spelling
    - Values are JSON objects
"""

from typing import Any

from pydantic import BaseModel

from marketid.core.domain_types import IdentifierKind


class EntryWrite(BaseModel):
    value: dict[str, Any]


class EntryView(BaseModel):
    """Stored entry — key rendered in text form, value as stored."""
    kind: IdentifierKind
    key: str
    key_hex: str
    value: dict[str, Any]
