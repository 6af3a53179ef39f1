"""Identifier Codec — immutable fixed-size identifier values packed from text.

Invariants:
    - raw is always exactly HEADER_SIZE + MAX_LENGTH_IN_BYTES bytes, zero padded
    - encode is all-or-nothing: the first invalid input aborts with a precise IdentifierError
    - decode_bytes validates length only; from_trusted_bytes treats bad length as a caller bug
    - Equality, ordering and hashing all read comparison_key (packed region, header excluded)
    - Values of different identifier classes never compare equal and are not ordered

Design Decisions:
    - Frozen dataclass base with ClassVar layout constants: subclasses only declare their
      layout and override the per-character hooks (ADR: shared logic, parameterized per variant)
    - Single comparison_key accessor feeds __eq__, __lt__ and __hash__ so the three cannot drift
"""

import functools
from dataclasses import dataclass
from typing import ClassVar, Self

from marketid.core.alphabet import Alphabet
from marketid.core.bit_packer import pack_codes, unpack_codes
from marketid.core.domain_types import IdentifierKind
from marketid.core.errors import (
    BytesTooLongError, BytesTooShortError, ContractViolationError,
    InvalidCodeError, StringTooLongError, StringTooShortError,
)
from marketid.core.storage_protocols import StorageBound


# Unicode White_Space. str.isspace() also matches U+001C..U+001F, which are
# rejected as invalid characters instead of trimmed.
WHITESPACE: str = "\t\n\x0b\x0c\r \x85\xa0" + "".join(map(chr, (
    0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000,
)))


@functools.total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class PackedIdentifier:
    """Base for identifiers stored as 6-bit codes behind an optional header."""
    raw: bytes

    KIND: ClassVar[IdentifierKind]
    TYPE_NAME: ClassVar[str]
    ALPHABET: ClassVar[Alphabet]
    BOUND: ClassVar[StorageBound]

    MIN_LENGTH: ClassVar[int]
    MAX_LENGTH: ClassVar[int]
    # Bounds of the packed region; whole slices add HEADER_SIZE.
    MIN_LENGTH_IN_BYTES: ClassVar[int]
    MAX_LENGTH_IN_BYTES: ClassVar[int]
    HEADER_SIZE: ClassVar[int] = 0

    def __post_init__(self):
        raw = bytes(self.raw)
        if len(raw) != self.total_size():
            raise ContractViolationError(
                f"{self.TYPE_NAME} buffer must be {self.total_size()} bytes, got {len(raw)}",
            )
        object.__setattr__(self, "raw", raw)

    # ─── Layout ──────────────────────────────────────────────

    @classmethod
    def total_size(cls) -> int:
        return cls.HEADER_SIZE + cls.MAX_LENGTH_IN_BYTES

    @classmethod
    def min_slice_size(cls) -> int:
        return cls.HEADER_SIZE + cls.MIN_LENGTH_IN_BYTES

    # ─── Construction ────────────────────────────────────────

    @classmethod
    def encode(cls, text: str) -> Self:
        """Validate and pack a human-readable identifier."""
        text = cls.normalize_text(text)
        length = len(text)
        if length < cls.MIN_LENGTH:
            raise StringTooShortError(cls.TYPE_NAME, cls.MIN_LENGTH)
        if length > cls.MAX_LENGTH:
            raise StringTooLongError(cls.TYPE_NAME, cls.MAX_LENGTH)
        cls.check_text(text)

        codes = [cls.ALPHABET.encode_char(char) for char in text]
        buffer = bytearray(cls.total_size())
        pack_codes(buffer, codes, cls.HEADER_SIZE)
        for index, char in enumerate(text):
            cls.record_char(buffer, index, char)
        return cls(bytes(buffer))

    @classmethod
    def decode_bytes(cls, data: bytes | bytearray | memoryview) -> Self:
        """Build from an untrusted slice, e.g. the output of to_bytes()."""
        data = bytes(data)
        if len(data) < cls.min_slice_size():
            raise BytesTooShortError(cls.TYPE_NAME, cls.MIN_LENGTH_IN_BYTES)
        if len(data) > cls.total_size():
            raise BytesTooLongError(cls.TYPE_NAME, cls.MAX_LENGTH_IN_BYTES)
        return cls(data.ljust(cls.total_size(), b"\x00"))

    @classmethod
    def from_trusted_bytes(cls, raw: bytes | bytearray | memoryview) -> Self:
        """Build from bytes already validated by the caller (e.g. read back from the store).

        Out-of-range length is a contract violation, not a recoverable input error.
        """
        raw = bytes(raw)
        if not cls.min_slice_size() <= len(raw) <= cls.total_size():
            raise ContractViolationError(
                f"{cls.TYPE_NAME} slice length {len(raw)} out of range",
            )
        return cls(raw.ljust(cls.total_size(), b"\x00"))

    # ─── Per-variant hooks ───────────────────────────────────

    @classmethod
    def normalize_text(cls, text: str) -> str:
        return text.strip(WHITESPACE)

    @classmethod
    def check_text(cls, text: str) -> None:
        pass

    @classmethod
    def record_char(cls, buffer: bytearray, index: int, char: str) -> None:
        pass

    def render_code(self, index: int, code: int) -> str:
        return self.ALPHABET.decode_code(code)

    # ─── Views ───────────────────────────────────────────────

    def to_display_string(self) -> str:
        codes = unpack_codes(self.raw, self.MAX_LENGTH, self.HEADER_SIZE)
        return "".join(self.render_code(index, code) for index, code in enumerate(codes))

    def to_bytes(self) -> bytes:
        """Trimmed binary form: trailing zero bytes dropped, never below min_slice_size()."""
        used = len(self.raw.rstrip(b"\x00"))
        return self.raw[:max(used, self.min_slice_size())]

    @property
    def comparison_key(self) -> bytes:
        """Packed region only — the single source for equality, ordering and hashing."""
        return self.raw[self.HEADER_SIZE:]

    # ─── Protocols ───────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.comparison_key == other.comparison_key

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.comparison_key < other.comparison_key

    def __hash__(self) -> int:
        return hash((self.KIND, self.comparison_key))

    def __str__(self) -> str:
        return self.to_display_string()

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __repr__(self) -> str:
        try:
            return f"{type(self).__name__}({self.to_display_string()!r})"
        except InvalidCodeError:
            return f"{type(self).__name__}(raw={self.raw.hex()})"
