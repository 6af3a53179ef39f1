"""Alphabet Codec — bidirectional mapping between characters and 6-bit codes.

Invariants:
    - Lower letters -> 1..26, digits -> 27..36, '-' -> 37, '_' -> 38 (actor alphabet only)
    - Code 0 is never assigned: it is the terminator in packed buffers
    - Upper letters map to the same code as their lower form; case is not a code property

Design Decisions:
    - One frozen Alphabet instance per identifier variant instead of per-variant branches
      in the packer (ADR: shared logic, parameterized per variant)
"""

from dataclasses import dataclass

from marketid.core.errors import InvalidCharacterError, InvalidCodeError


TERMINATOR: int = 0
CODE_MASK: int = 0b0011_1111

_LETTER_BASE: int = ord("a") - 1
_UPPER_BASE: int = ord("A") - 1
_DIGIT_BASE: int = ord("0") - 1 - 26
HYPHEN_CODE: int = 37
UNDERSCORE_CODE: int = 38


@dataclass(frozen=True)
class Alphabet:
    """Character set of one identifier variant."""
    type_name: str
    allow_underscore: bool = False

    def encode_char(self, char: str) -> int:
        """Map one character to its code. Raises InvalidCharacterError."""
        if "a" <= char <= "z":
            return ord(char) - _LETTER_BASE
        if "A" <= char <= "Z":
            return ord(char) - _UPPER_BASE
        if "0" <= char <= "9":
            return ord(char) - _DIGIT_BASE
        if char == "-":
            return HYPHEN_CODE
        if char == "_" and self.allow_underscore:
            return UNDERSCORE_CODE
        raise InvalidCharacterError(self.type_name, char)

    def decode_code(self, code: int, upper: bool = False) -> str:
        """Map a non-terminator code back to its character."""
        if 1 <= code <= 26:
            return chr(code + (_UPPER_BASE if upper else _LETTER_BASE))
        if 27 <= code <= 36:
            return chr(code + _DIGIT_BASE)
        if code == HYPHEN_CODE:
            return "-"
        if code == UNDERSCORE_CODE and self.allow_underscore:
            return "_"
        raise InvalidCodeError(self.type_name, code)


def is_upper_letter(char: str) -> bool:
    return "A" <= char <= "Z"
