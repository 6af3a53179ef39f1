"""Serialization Adapter — explicit text and binary surfaces.

Tests:
    - Each mode serializes to its surface and deserializes back identically
    - Wrong payload type for a mode raises PayloadTypeError
    - parse() accepts any surface
"""

import pytest

from marketid.core.actor_id import ActorId
from marketid.core.catalog_id import CatalogId, ItemId
from marketid.core.domain_types import SerializationMode
from marketid.core.errors import BytesTooShortError, PayloadTypeError, StringTooShortError
from marketid.core.serialization import deserialize, parse, serialize


def test_text_mode_emits_display_string():
    assert serialize(ActorId.encode("Anthol_User"), SerializationMode.TEXT) == "Anthol_User"
    assert serialize(CatalogId.encode("Wiggle"), SerializationMode.TEXT) == "wiggle"


def test_binary_mode_emits_trimmed_bytes():
    assert serialize(CatalogId.encode("abc"), SerializationMode.BINARY) == bytes([0x81, 0x30])


@pytest.mark.parametrize("mode", list(SerializationMode))
def test_round_trip_in_each_mode(mode):
    actor = ActorId.encode("Anthol_User")
    restored = deserialize(ActorId, serialize(actor, mode), mode)
    assert restored == actor
    assert str(restored) == "Anthol_User"


def test_text_mode_matches_encode():
    assert deserialize(ItemId, "Abc-1", SerializationMode.TEXT) == ItemId.encode("abc-1")


def test_binary_mode_matches_decode_bytes():
    raw = bytes([0x81, 0x30])
    assert deserialize(CatalogId, raw, SerializationMode.BINARY) == CatalogId.decode_bytes(raw)


def test_text_mode_rejects_bytes():
    with pytest.raises(PayloadTypeError) as exc:
        deserialize(ActorId, b"abc", SerializationMode.TEXT)
    assert (exc.value.expected, exc.value.received) == ("text", "bytes")


def test_binary_mode_rejects_text():
    with pytest.raises(PayloadTypeError):
        deserialize(ActorId, "abc", SerializationMode.BINARY)


def test_deserialize_propagates_codec_errors():
    with pytest.raises(StringTooShortError):
        deserialize(CatalogId, "ab", SerializationMode.TEXT)
    with pytest.raises(BytesTooShortError):
        deserialize(CatalogId, b"\x01", SerializationMode.BINARY)


def test_parse_accepts_every_surface():
    actor = ActorId.encode("Anthol_User")
    assert parse(ActorId, actor) is actor
    assert parse(ActorId, "anthol_user") == actor
    assert str(parse(ActorId, actor.to_bytes())) == "Anthol_User"


def test_parse_rejects_other_types():
    with pytest.raises(PayloadTypeError):
        parse(ActorId, 42)
    with pytest.raises(PayloadTypeError):
        parse(ItemId, CatalogId.encode("abc"))
