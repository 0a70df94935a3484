"""16-bit little-endian PCM helpers."""

from __future__ import annotations

import struct
from typing import BinaryIO

INT16_SIZE = 2
_SAMPLE = struct.Struct("<h")
_LIMIT = 32767


def normalize_audio(audio: bytes, volume: float) -> bytes:
    """Scale 16-bit little-endian samples by ``volume``, clamped to +/-32767."""
    if volume == 1:
        return bytes(audio)
    if len(audio) % INT16_SIZE:
        raise ValueError("audio length must be a whole number of 16-bit samples")
    scaled = (
        max(-_LIMIT, min(_LIMIT, int(volume * sample)))
        for (sample,) in _SAMPLE.iter_unpack(audio)
    )
    return b"".join(_SAMPLE.pack(value) for value in scaled)


def read_int16_from_bytes(data: bytes) -> int:
    """Decode the first two bytes of ``data`` as a little-endian int16."""
    if len(data) < INT16_SIZE:
        raise ValueError("need at least two bytes to read an int16")
    return _SAMPLE.unpack_from(data)[0]


def read_int16(stream: BinaryIO) -> int:
    """Read exactly two bytes from ``stream`` as a little-endian int16."""
    chunk = stream.read(INT16_SIZE)
    if len(chunk) < INT16_SIZE:
        raise EOFError("unexpected end of stream while reading int16")
    return _SAMPLE.unpack(chunk)[0]


def write_int16(stream: BinaryIO, value: int) -> None:
    """Write ``value`` to ``stream`` as a little-endian int16."""
    if not -32768 <= value <= 32767:
        raise ValueError(f"value out of int16 range: {value}")
    stream.write(_SAMPLE.pack(value))