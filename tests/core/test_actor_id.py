"""ActorId — case-preserving display, case-insensitive identity.

Tests:
    - Round-trip through text and bytes keeps exact case
    - Equality, ordering and hashing ignore case
    - Length, character and byte-length validation errors
"""

import pytest

from marketid.core.actor_id import ActorId
from marketid.core.errors import (
    BytesTooLongError, BytesTooShortError, ContractViolationError,
    IdentifierError, InvalidCharacterError, StringTooLongError,
    StringTooShortError,
)


@pytest.mark.parametrize("text", [
    "test", "Anthol_User", "Anthol_User-123", "AntholUser_", "z" * 24,
    "abc", "A-_", "___", "0123456789", "MiXeD-CaSe_42",
])
def test_encode_round_trips_display(text):
    actor = ActorId.encode(text)
    assert actor.to_display_string() == text
    assert str(actor) == text


@pytest.mark.parametrize("text", ["Anthol_User", "abc", "Z" * 24, "a_B-c_D-e"])
def test_bytes_round_trip_keeps_case(text):
    actor = ActorId.encode(text)
    decoded = ActorId.decode_bytes(actor.to_bytes())
    assert decoded == actor
    assert decoded.to_display_string() == text


def test_layout_is_bitmap_then_packed_codes():
    actor = ActorId.encode("Abc")
    assert actor.raw[:3] == bytes([1, 0, 0])
    assert actor.raw[3:5] == bytes([0x81, 0x30])
    assert len(actor.raw) == 21


def test_trimmed_bytes_never_shorter_than_six():
    assert ActorId.encode("abc").to_bytes() == bytes([0, 0, 0, 0x81, 0x30, 0])


def test_trimmed_bytes_length_for_long_handle():
    assert len(ActorId.encode("Anthol_User").to_bytes()) == 12
    assert len(ActorId.encode("z" * 24).to_bytes()) == 21


def test_strips_surrounding_whitespace():
    assert str(ActorId.encode("  Anthol_User\n")) == "Anthol_User"


def test_equality_ignores_case():
    assert ActorId.encode("Anthol_User") == ActorId.encode("anthol_user")
    assert ActorId.encode("Anthol_User") != ActorId.encode("Anthol_User-123")


def test_equal_ids_keep_their_own_display():
    a = ActorId.encode("Anthol_User")
    b = ActorId.encode("anthol_user")
    assert (str(a), str(b)) == ("Anthol_User", "anthol_user")


def test_ordering_ignores_case():
    assert ActorId.encode("Anthol_User") < ActorId.encode("Anthol_User-123")
    assert ActorId.encode("ANTHOL_USER") < ActorId.encode("anthol_user-123")
    assert ActorId.encode("Anthol_User") <= ActorId.encode("anthol_user")


def test_ordering_follows_comparison_key():
    ids = [ActorId.encode(t) for t in ("zeta", "Alpha", "beta-2", "BETA", "m_n", "q9x", "Abc", "abd")]
    assert sorted(ids) == sorted(ids, key=lambda i: i.comparison_key)


def test_ordering_skips_case_bitmap():
    upper, lower = ActorId.encode("Abc"), ActorId.encode("abd")
    # The bitmap alone would put "abd" first.
    assert upper.raw > lower.raw
    assert upper.comparison_key == bytes([0x81, 0x30]) + bytes(16)
    assert upper < lower


def test_hash_ignores_case():
    assert len({ActorId.encode("Anthol_User"), ActorId.encode("ANTHOL_USER")}) == 1


def test_length_bounds():
    ActorId.encode("abc")
    ActorId.encode("a" * 24)
    with pytest.raises(StringTooShortError) as short:
        ActorId.encode("id")
    with pytest.raises(StringTooLongError) as long:
        ActorId.encode("z" * 25)
    assert str(short.value) == "ActorId is shorter than 3 characters."
    assert str(long.value) == "ActorId is longer than 24 characters."


def test_length_measured_after_strip():
    with pytest.raises(StringTooShortError):
        ActorId.encode("  ab  ")


def test_invalid_character():
    with pytest.raises(InvalidCharacterError) as exc:
        ActorId.encode("id!")
    assert exc.value.char == "!"


def test_non_ascii_reports_offending_character():
    with pytest.raises(InvalidCharacterError) as exc:
        ActorId.encode("アイディー")
    assert exc.value.char == "ア"


def test_first_invalid_character_aborts():
    with pytest.raises(InvalidCharacterError) as exc:
        ActorId.encode("ab!c?")
    assert exc.value.char == "!"


def test_leading_hyphen_allowed_for_actors():
    assert str(ActorId.encode("-id-")) == "-id-"


def test_decode_bytes_bounds():
    ActorId.decode_bytes(bytes(6))
    ActorId.decode_bytes(bytes(21))
    with pytest.raises(BytesTooShortError) as short:
        ActorId.decode_bytes(bytes(5))
    with pytest.raises(BytesTooLongError) as long:
        ActorId.decode_bytes(bytes(22))
    assert short.value.min_bytes == 3
    assert long.value.max_bytes == 18


def test_decode_bytes_accepts_bytearray_and_memoryview():
    raw = ActorId.encode("Anthol_User").to_bytes()
    assert str(ActorId.decode_bytes(bytearray(raw))) == "Anthol_User"
    assert str(ActorId.decode_bytes(memoryview(raw))) == "Anthol_User"


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        ActorId.encode("!!!")
    assert issubclass(StringTooShortError, IdentifierError)


def test_trusted_bytes_round_trip():
    actor = ActorId.encode("Anthol_User")
    assert str(ActorId.from_trusted_bytes(actor.to_bytes())) == "Anthol_User"


@pytest.mark.parametrize("size", [0, 5, 22])
def test_trusted_bytes_out_of_range_is_contract_violation(size):
    with pytest.raises(ContractViolationError) as exc:
        ActorId.from_trusted_bytes(bytes(size))
    assert not isinstance(exc.value, ValueError)


def test_values_are_immutable():
    actor = ActorId.encode("abc")
    with pytest.raises(AttributeError):
        actor.raw = bytes(21)


def test_storage_bound():
    assert ActorId.BOUND.max_size_bytes == 21
    assert ActorId.BOUND.is_fixed_size is False


def test_repr_shows_display():
    assert repr(ActorId.encode("Anthol_User")) == "ActorId('Anthol_User')"


def test_separator_controls_are_not_trimmed():
    with pytest.raises(InvalidCharacterError) as exc:
        ActorId.encode("Anthol_User\x1f")
    assert exc.value.char == "\x1f"
    assert str(ActorId.encode(" Anthol_User　")) == "Anthol_User"
