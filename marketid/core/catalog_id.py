"""CatalogId — 21-character case-folded id for items, stores and markets.

Invariants:
    - Layout: bytes [0,16) packed codes, no header
    - Input is ASCII-lowercased before validation; display is always lowercase
    - Accepts a-z, 0-9, '-'; length 3..21; no leading or trailing hyphen
    - ItemId, StoreId and MarketId share the codec but are distinct, mutually
      incomparable types, each with its own storage bound

Design Decisions:
    - Only ASCII letters are folded: str.lower() would rewrite non-ASCII characters
      (and can change the length) before they are reported as invalid
"""

import string
from typing import ClassVar

from marketid.core.alphabet import Alphabet
from marketid.core.bit_packer import packed_size
from marketid.core.domain_types import IdentifierKind
from marketid.core.errors import InvalidHyphenPositionError
from marketid.core.identifier import PackedIdentifier
from marketid.core.storage_protocols import StorageBound


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class CatalogId(PackedIdentifier):
    """Human readable id: case-insensitive, letters, digits and inner hyphens."""

    KIND: ClassVar[IdentifierKind] = IdentifierKind.CATALOG
    TYPE_NAME: ClassVar[str] = "Id"
    ALPHABET: ClassVar[Alphabet] = Alphabet("Id")
    BOUND: ClassVar[StorageBound] = StorageBound(max_size_bytes=16, is_fixed_size=False)

    MIN_LENGTH: ClassVar[int] = 3
    MAX_LENGTH: ClassVar[int] = 21
    MIN_LENGTH_IN_BYTES: ClassVar[int] = 2
    MAX_LENGTH_IN_BYTES: ClassVar[int] = packed_size(MAX_LENGTH)

    @classmethod
    def normalize_text(cls, text: str) -> str:
        return super().normalize_text(text).translate(_ASCII_LOWER)

    @classmethod
    def check_text(cls, text: str) -> None:
        if text.startswith("-") or text.endswith("-"):
            raise InvalidHyphenPositionError(cls.TYPE_NAME)


class ItemId(CatalogId):
    KIND: ClassVar[IdentifierKind] = IdentifierKind.ITEM
    TYPE_NAME: ClassVar[str] = "ItemId"
    ALPHABET: ClassVar[Alphabet] = Alphabet("ItemId")


class StoreId(CatalogId):
    KIND: ClassVar[IdentifierKind] = IdentifierKind.STORE
    TYPE_NAME: ClassVar[str] = "StoreId"
    ALPHABET: ClassVar[Alphabet] = Alphabet("StoreId")


class MarketId(CatalogId):
    KIND: ClassVar[IdentifierKind] = IdentifierKind.MARKET
    TYPE_NAME: ClassVar[str] = "MarketId"
    ALPHABET: ClassVar[Alphabet] = Alphabet("MarketId")
