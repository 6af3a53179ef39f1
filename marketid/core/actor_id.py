"""ActorId — 24-character actor handle, displayed with its original case, compared without it.

Invariants:
    - Layout: bytes [0,3) case bitmap, bytes [3,21) packed codes
    - Accepts a-z, A-Z, 0-9, '-', '_'; length 3..24 after stripping whitespace
    - encode("Anthol_User") == encode("anthol_user"); str() of each keeps its own case
"""

from typing import ClassVar

from marketid.core.alphabet import Alphabet, is_upper_letter
from marketid.core.bit_packer import packed_size
from marketid.core.case_bitmap import BITMAP_CAPACITY, BITMAP_SIZE, is_upper, mark_upper
from marketid.core.domain_types import IdentifierKind
from marketid.core.identifier import PackedIdentifier
from marketid.core.storage_protocols import StorageBound


class ActorId(PackedIdentifier):
    """Human readable id for actors (users, canisters, services)."""

    KIND: ClassVar[IdentifierKind] = IdentifierKind.ACTOR
    TYPE_NAME: ClassVar[str] = "ActorId"
    ALPHABET: ClassVar[Alphabet] = Alphabet("ActorId", allow_underscore=True)
    BOUND: ClassVar[StorageBound] = StorageBound(max_size_bytes=21, is_fixed_size=False)

    MIN_LENGTH: ClassVar[int] = 3
    MAX_LENGTH: ClassVar[int] = BITMAP_CAPACITY
    MIN_LENGTH_IN_BYTES: ClassVar[int] = 3
    MAX_LENGTH_IN_BYTES: ClassVar[int] = packed_size(MAX_LENGTH)
    HEADER_SIZE: ClassVar[int] = BITMAP_SIZE

    @classmethod
    def record_char(cls, buffer: bytearray, index: int, char: str) -> None:
        if is_upper_letter(char):
            mark_upper(buffer, index)

    def render_code(self, index: int, code: int) -> str:
        return self.ALPHABET.decode_code(code, upper=is_upper(self.raw, index))

    @property
    def case_bitmap(self) -> bytes:
        return self.raw[:self.HEADER_SIZE]
