"""Bit Packer — packs 6-bit codes into a byte buffer, LSB-first.

Invariants:
    - Code i occupies bits [i*6, i*6+6) of the packed region; byte_index = bit_position // 8 + offset
    - A code at bit_offset > 2 straddles into the next byte
    - Unpacking stops at the first terminator (0) or after max_length codes
    - All writes go through bytearray indexing (bounds-checked); callers size the buffer

Design Decisions:
    - Free functions over a class: the packer holds no state, identifiers call it with
      their own offset and capacity
"""

from marketid.core.alphabet import CODE_MASK, TERMINATOR


BITS_PER_CHAR: int = 6


def packed_size(char_count: int) -> int:
    """Bytes needed for char_count codes: ceil(n * 6 / 8)."""
    return (char_count * BITS_PER_CHAR + 7) // 8


def pack_code(buffer: bytearray, index: int, code: int, offset: int = 0) -> None:
    """OR one code into buffer at character index `index`."""
    bit_position = index * BITS_PER_CHAR
    byte_index = bit_position // 8 + offset
    bit_offset = bit_position % 8

    buffer[byte_index] |= (code << bit_offset) & 0xFF
    if bit_offset > 2:
        buffer[byte_index + 1] |= code >> (8 - bit_offset)


def unpack_code(buffer: bytes | bytearray, index: int, offset: int = 0) -> int:
    """Read the code stored at character index `index`."""
    bit_position = index * BITS_PER_CHAR
    byte_index = bit_position // 8 + offset
    bit_offset = bit_position % 8

    value = buffer[byte_index] >> bit_offset
    if bit_offset > 2:
        value |= buffer[byte_index + 1] << (8 - bit_offset)
    return value & CODE_MASK


def pack_codes(buffer: bytearray, codes: list[int], offset: int = 0) -> None:
    for index, code in enumerate(codes):
        pack_code(buffer, index, code, offset)


def unpack_codes(
    buffer: bytes | bytearray, max_length: int, offset: int = 0,
) -> list[int]:
    """Codes up to the terminator or max_length, whichever comes first."""
    codes = []
    for index in range(max_length):
        code = unpack_code(buffer, index, offset)
        if code == TERMINATOR:
            break
        codes.append(code)
    return codes
