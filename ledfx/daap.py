"""Reading and writing the DAAP-tagged track metadata sent by AirPlay senders."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

_log = logging.getLogger(__name__)

_HEADER_SIZE = 8
_ITEM_HEADER = struct.Struct(">4sI")
_LENGTH = struct.Struct(">I")
_LOADING_TITLE = "Loading…"


class _Kind(Enum):
    BYTE = "byte"
    STRING = "string"


@dataclass(frozen=True)
class _ContentType:
    code: str
    name: str
    kind: _Kind


# Only the tags we care about; everything else is skipped.
_CONTENT_TYPES = (
    _ContentType("mikd", "dmap.itemkind", _Kind.BYTE),
    _ContentType("asal", "daap.songalbum", _Kind.STRING),
    _ContentType("asar", "daap.songartist", _Kind.STRING),
    _ContentType("minm", "dmap.itemname", _Kind.STRING),
)
_BY_CODE = {ct.code: ct for ct in _CONTENT_TYPES}
_BY_NAME = {ct.name: ct for ct in _CONTENT_TYPES}


def format_track(song: str, artist: str) -> str:
    """A one-line "now playing" banner for a track."""
    return f"🎵 Now playing ➜ {song} by {artist}"


class _TrackAnnouncer:
    """Logs the current track whenever it changes."""

    def __init__(self) -> None:
        self.last_song: Optional[str] = None

    def __call__(self, data: Mapping[str, Any]) -> None:
        song = data.get("dmap.itemname")
        if not isinstance(song, str) or song == self.last_song or song == _LOADING_TITLE:
            return
        artist = data.get("daap.songartist")
        if not isinstance(artist, str):
            return
        self.last_song = song
        _log.info(format_track(song, artist))


_announce_track = _TrackAnnouncer()


def parse_daap(data: bytes) -> dict[str, Any]:
    """Decode the known tags of a DAAP payload into a name -> value mapping.

    The first eight bytes are a container header and are skipped. Byte tags
    become ints, string tags become str.
    """
    parsed: dict[str, Any] = {}
    offset = _HEADER_SIZE
    while offset < len(data):
        if offset + _ITEM_HEADER.size > len(data):
            raise ValueError(f"truncated DAAP item header at offset {offset}")
        raw_code, length = _ITEM_HEADER.unpack_from(data, offset)
        start = offset + _ITEM_HEADER.size
        end = start + length
        if end > len(data):
            raise ValueError(f"truncated DAAP item at offset {offset}")
        if length:
            content_type = _BY_CODE.get(raw_code.decode("latin-1"))
            if content_type is not None:
                value = data[start:end]
                if content_type.kind is _Kind.BYTE:
                    parsed[content_type.name] = value[0]
                else:
                    parsed[content_type.name] = value.decode("utf-8", errors="replace")
        offset = end
    _announce_track(parsed)
    return parsed


def encode_daap(values: Mapping[str, Any]) -> bytes:
    """Encode a name -> value mapping as a DAAP payload.

    Names that are not known tags are left out. The payload starts with
    eight zero bytes of padding.
    """
    chunks = [bytes(_HEADER_SIZE)]
    for name, value in values.items():
        content_type = _BY_NAME.get(name)
        if content_type is None:
            continue
        if content_type.kind is _Kind.BYTE:
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{name} needs a byte value, got {value!r}")
            payload = bytes([value])
        else:
            payload = str(value).encode("utf-8")
        chunks.append(content_type.code.encode("ascii"))
        chunks.append(_LENGTH.pack(len(payload)))
        chunks.append(payload)
    return b"".join(chunks)