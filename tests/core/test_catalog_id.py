"""CatalogId — case-folded ids for items, stores and markets.

Tests:
    - Round-trip and byte-length correlation
    - Case folding, hyphen rule, length bounds
    - Trimmed binary form keeps interior zero bytes
    - Wrapper types share the codec but never compare with each other
"""

import pytest

from marketid.core.catalog_id import CatalogId, ItemId, MarketId, StoreId
from marketid.core.errors import (
    BytesTooLongError, BytesTooShortError, ContractViolationError,
    InvalidCharacterError, InvalidCodeError, InvalidHyphenPositionError,
    StringTooLongError, StringTooShortError,
)


@pytest.mark.parametrize("text", ["abc", "abc-123", "wiggle-stool", "z" * 21, "a-b-c", "000"])
def test_encode_round_trips_display(text):
    assert str(CatalogId.encode(text)) == text


@pytest.mark.parametrize("text,size", [
    ("abc", 2), ("abc-123", 6), ("wiggle-stool", 9), ("z" * 21, 16),
])
def test_byte_length_correlation(text, size):
    assert len(CatalogId.encode(text).to_bytes()) == size


@pytest.mark.parametrize("text", ["abc", "abc-123", "wiggle-stool", "z" * 21, "abcdaap"])
def test_bytes_round_trip(text):
    catalog = CatalogId.encode(text)
    decoded = CatalogId.decode_bytes(catalog.to_bytes())
    assert decoded == catalog
    assert str(decoded) == text


def test_abc_layout():
    assert CatalogId.encode("abc").to_bytes() == bytes([0x81, 0x30])


def test_interior_zero_byte_is_kept():
    raw = CatalogId.encode("abcdaap").to_bytes()
    assert len(raw) == 6
    assert raw[4] == 0
    assert str(CatalogId.decode_bytes(raw)) == "abcdaap"


def test_upper_case_is_folded():
    assert CatalogId.encode("ABC-123") == CatalogId.encode("abc-123")
    assert str(CatalogId.encode("Wiggle-Stool")) == "wiggle-stool"


def test_folded_and_lower_encodings_are_identical():
    assert CatalogId.encode("WIGGLE").raw == CatalogId.encode("wiggle").raw


def test_non_ascii_is_not_folded():
    with pytest.raises(InvalidCharacterError) as exc:
        CatalogId.encode("ÄBC")
    assert exc.value.char == "Ä"


def test_hyphen_position():
    with pytest.raises(InvalidHyphenPositionError):
        CatalogId.encode("id-")
    with pytest.raises(InvalidHyphenPositionError):
        CatalogId.encode("-id")
    assert str(CatalogId.encode("i-d")) == "i-d"


def test_hyphen_checked_after_strip():
    with pytest.raises(InvalidHyphenPositionError):
        CatalogId.encode("  -abc  ")


def test_length_bounds():
    CatalogId.encode("abc")
    CatalogId.encode("z" * 21)
    with pytest.raises(StringTooShortError):
        CatalogId.encode("id")
    with pytest.raises(StringTooLongError):
        CatalogId.encode("z" * 22)


def test_error_messages():
    with pytest.raises(InvalidCharacterError) as exc:
        CatalogId.encode("id!")
    assert str(exc.value) == "Invalid character '!' in Id."
    with pytest.raises(InvalidHyphenPositionError) as exc:
        CatalogId.encode("id-")
    assert str(exc.value) == "Id cannot start or end with a hyphen."


def test_underscore_rejected():
    with pytest.raises(InvalidCharacterError) as exc:
        CatalogId.encode("a_b")
    assert exc.value.char == "_"


def test_decode_bytes_bounds():
    CatalogId.decode_bytes(bytes(2))
    CatalogId.decode_bytes(bytes(16))
    with pytest.raises(BytesTooShortError):
        CatalogId.decode_bytes(bytes(1))
    with pytest.raises(BytesTooLongError):
        CatalogId.decode_bytes(bytes(17))


def test_display_of_unmapped_code_raises():
    garbage = CatalogId.decode_bytes(bytes([0x3F, 0x00]))
    with pytest.raises(InvalidCodeError) as exc:
        garbage.to_display_string()
    assert exc.value.code_value == 63
    assert repr(garbage).startswith("CatalogId(raw=3f00")


def test_trusted_bytes_out_of_range():
    with pytest.raises(ContractViolationError):
        CatalogId.from_trusted_bytes(bytes(1))
    with pytest.raises(ContractViolationError):
        CatalogId.from_trusted_bytes(bytes(17))


def test_ordering_and_hash():
    a = CatalogId.encode("abc")
    assert a < CatalogId.encode("abc-123")
    assert hash(a) == hash(CatalogId.encode("ABC"))


def test_storage_bound():
    for cls in (CatalogId, ItemId, StoreId, MarketId):
        assert cls.BOUND.max_size_bytes == 16
        assert cls.BOUND.is_fixed_size is False


def test_wrappers_share_codec():
    assert ItemId.encode("wiggle-stool").raw == CatalogId.encode("wiggle-stool").raw
    assert str(StoreId.encode("Corner-Shop")) == "corner-shop"


def test_wrappers_report_their_own_name():
    with pytest.raises(StringTooShortError) as exc:
        MarketId.encode("ab")
    assert str(exc.value) == "MarketId is shorter than 3 characters."


def test_different_wrappers_never_equal():
    assert ItemId.encode("abc") != StoreId.encode("abc")
    assert ItemId.encode("abc") != CatalogId.encode("abc")
    with pytest.raises(TypeError):
        ItemId.encode("abc") < StoreId.encode("abd")


@pytest.mark.parametrize("char", ["\x1c", "\x1d", "\x1e", "\x1f"])
def test_separator_controls_are_not_trimmed(char):
    with pytest.raises(InvalidCharacterError) as exc:
        CatalogId.encode(char + "abc")
    assert exc.value.char == char


@pytest.mark.parametrize("pad", ["\t", "\xa0", " ", "　", "\x85"])
def test_unicode_whitespace_is_trimmed(pad):
    assert str(CatalogId.encode(pad + "ABC" + pad)) == "abc"
