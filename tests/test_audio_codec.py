import io
import struct

import pytest

from ledfx.audio_codec import (
    normalize_audio,
    read_int16,
    read_int16_from_bytes,
    write_int16,
)


def _pcm(*samples):
    return struct.pack(f"<{len(samples)}h", *samples)


def _samples(data):
    return list(struct.unpack(f"<{len(data) // 2}h", data))


def test_read_int16():
    assert read_int16(io.BytesIO(b"gg")) == 26471


def test_read_int16_from_bytes():
    assert read_int16_from_bytes(b"gg") == 26471


def test_read_int16_from_bytes_ignores_extra():
    assert read_int16_from_bytes(b"gg!!") == 26471


def test_read_int16_from_bytes_too_short():
    with pytest.raises(ValueError):
        read_int16_from_bytes(b"g")


def test_read_int16_short_stream():
    with pytest.raises(EOFError):
        read_int16(io.BytesIO(b"g"))


@pytest.mark.parametrize("value", [0, 1, -1, 26471, 32767, -32768])
def test_write_read_round_trip(value):
    buf = io.BytesIO()
    write_int16(buf, value)
    assert len(buf.getvalue()) == 2
    buf.seek(0)
    assert read_int16(buf) == value


def test_write_int16_out_of_range():
    with pytest.raises(ValueError):
        write_int16(io.BytesIO(), 40000)


def test_normalize_unity_volume_unchanged():
    data = _pcm(-32768, 0, 1234)
    assert normalize_audio(data, 1) == data


def test_normalize_halves_and_truncates():
    data = _pcm(1000, -1001, 0)
    assert _samples(normalize_audio(data, 0.5)) == [500, -500, 0]


def test_normalize_clamps():
    data = _pcm(20000, -20000)
    assert _samples(normalize_audio(data, 2)) == [32767, -32767]


def test_normalize_zero_volume_silences():
    data = _pcm(300, -300, 32767)
    assert _samples(normalize_audio(data, 0)) == [0, 0, 0]


def test_normalize_odd_length():
    with pytest.raises(ValueError):
        normalize_audio(b"\x01\x02\x03", 0.5)