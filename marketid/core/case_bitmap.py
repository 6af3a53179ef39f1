"""Case Bitmap — one bit per character position recording upper case (actor ids only).

Invariants:
    - Bit i (LSB-first across BITMAP_SIZE bytes) set <=> character i was upper case at encode
    - Written only by encode, read only by display reconstruction
    - Never part of a comparison key
"""

BITMAP_SIZE: int = 3
BITMAP_CAPACITY: int = BITMAP_SIZE * 8


def mark_upper(buffer: bytearray, position: int) -> None:
    buffer[position // 8] |= 1 << (position % 8)


def is_upper(buffer: bytes | bytearray, position: int) -> bool:
    return (buffer[position // 8] >> (position % 8)) & 1 == 1
