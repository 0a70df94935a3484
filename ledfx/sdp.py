"""Session Description Protocol payloads: data model, parser and writer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, TextIO, Union

SdpSource = Union[str, bytes, bytearray, BinaryIO, TextIO]


@dataclass
class Origin:
    """The ``o=`` line of a session description."""

    username: str = ""
    session_id: str = ""
    session_version: str = ""
    net_type: str = ""
    addr_type: str = ""
    unicast_address: str = ""


@dataclass
class ConnectData:
    """The ``c=`` line of a session description."""

    net_type: str = ""
    addr_type: str = ""
    connection_address: str = ""


@dataclass
class Timing:
    """The ``t=`` line of a session description."""

    start_time: int = 0
    stop_time: int = 0


@dataclass
class MediaDescription:
    """An ``m=`` line; the port is kept as text (``<port>/<number of ports>``)."""

    media: str = ""
    port: str = ""
    proto: str = ""
    fmt: str = ""


@dataclass
class SessionDescription:
    """A whole SDP payload."""

    version: int = 0
    origin: Origin = field(default_factory=Origin)
    session_name: str = ""
    information: str = ""
    connect_data: ConnectData = field(default_factory=ConnectData)
    timing: Timing = field(default_factory=Timing)
    media_descriptions: list[MediaDescription] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


def _lines(text: str):
    pieces = text.split("\n")
    if pieces and pieces[-1] == "":
        pieces.pop()
    for piece in pieces:
        yield piece[:-1] if piece.endswith("\r") else piece


def _fields(value: str, count: int, line: str) -> list[str]:
    parts = value.split()
    if len(parts) < count:
        raise ValueError(f"too few fields in SDP line: {line!r}")
    return parts


def _to_int(value: str, line: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"invalid integer in SDP line: {line!r}") from None


def parse(data: SdpSource) -> SessionDescription:
    """Parse an SDP payload given as text, bytes or a readable stream."""
    if hasattr(data, "read"):
        data = data.read()
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")

    sdp = SessionDescription()
    for line in _lines(data):
        kind, sep, value = line.partition("=")
        if not sep:
            raise ValueError(f"malformed SDP line: {line!r}")
        if kind == "v":
            sdp.version = _to_int(value, line)
        elif kind == "o":
            parts = _fields(value, 6, line)
            sdp.origin = Origin(*parts[:6])
        elif kind == "s":
            sdp.session_name = value
        elif kind == "c":
            parts = _fields(value, 3, line)
            sdp.connect_data = ConnectData(*parts[:3])
        elif kind == "t":
            parts = _fields(value, 2, line)
            sdp.timing = Timing(_to_int(parts[0], line), _to_int(parts[1], line))
        elif kind == "m":
            parts = _fields(value, 4, line)
            sdp.media_descriptions.append(MediaDescription(*parts[:4]))
        elif kind == "a":
            parts = value.split(":")
            if len(parts) < 2:
                raise ValueError(f"malformed SDP attribute: {line!r}")
            sdp.attributes[parts[0]] = parts[1]
        elif kind == "i":
            sdp.information = value
    return sdp


def serialize(session: SessionDescription) -> str:
    """Render a session description as SDP text with CRLF line endings."""
    o = session.origin
    c = session.connect_data
    t = session.timing
    lines = [
        f"v={session.version}",
        f"o={o.username} {o.session_id} {o.session_version} "
        f"{o.net_type} {o.addr_type} {o.unicast_address}",
        f"s={session.session_name}",
        f"c={c.net_type} {c.addr_type} {c.connection_address}",
        f"t={t.start_time} {t.stop_time}",
    ]
    lines.extend(f"m={m.media} {m.port} {m.proto} {m.fmt}" for m in session.media_descriptions)
    lines.extend(f"a={key}:{value}" for key, value in session.attributes.items())
    lines.append(f"i={session.information}")
    return "".join(line + "\r\n" for line in lines)