import struct

import pytest

from ledfx.daap import encode_daap, format_track, parse_daap


def _item(code: bytes, payload: bytes) -> bytes:
    return code + struct.pack(">I", len(payload)) + payload


def test_encode_string_wire_bytes():
    assert encode_daap({"dmap.itemname": "Hi"}) == (
        b"\x00" * 8 + b"minm" + b"\x00\x00\x00\x02" + b"Hi"
    )


def test_encode_byte_wire_bytes():
    assert encode_daap({"dmap.itemkind": 2}) == (
        b"\x00" * 8 + b"mikd" + b"\x00\x00\x00\x01" + b"\x02"
    )


def test_round_trip_all_known_tags():
    values = {
        "dmap.itemkind": 2,
        "daap.songalbum": "Album",
        "daap.songartist": "Artist",
        "dmap.itemname": "Title",
    }
    assert parse_daap(encode_daap(values)) == values


def test_round_trip_unicode_text():
    values = {"dmap.itemname": "Café ☕", "daap.songartist": "Ünïcode"}
    assert parse_daap(encode_daap(values)) == values


def test_encode_skips_unknown_names():
    assert encode_daap({"daap.itemname": "x"}) == b"\x00" * 8


def test_encode_rejects_out_of_range_byte():
    with pytest.raises(ValueError):
        encode_daap({"dmap.itemkind": 300})


def test_parse_skips_container_header():
    header = bytes([109, 108, 105, 116, 0, 0, 6, 17])
    data = header + _item(b"asal", b"Album")
    assert parse_daap(data) == {"daap.songalbum": "Album"}


def test_parse_ignores_unknown_tags():
    data = b"\x00" * 8 + _item(b"abcd", b"whatever") + _item(b"asar", b"Artist")
    assert parse_daap(data) == {"daap.songartist": "Artist"}


def test_parse_skips_empty_items():
    data = b"\x00" * 8 + _item(b"minm", b"") + _item(b"asal", b"A")
    assert parse_daap(data) == {"daap.songalbum": "A"}


def test_parse_header_only_is_empty():
    assert parse_daap(b"\x00" * 8) == {}


def test_parse_truncated_item_raises():
    data = b"\x00" * 8 + b"minm" + struct.pack(">I", 10) + b"abc"
    with pytest.raises(ValueError):
        parse_daap(data)


def test_parse_truncated_item_header_raises():
    with pytest.raises(ValueError):
        parse_daap(b"\x00" * 8 + b"min")


def test_format_track_names_song_and_artist():
    text = format_track("Song", "Artist")
    assert text.endswith("Song by Artist")
    assert "Now playing" in text