"""Realtime UDP output to LED controllers."""

from __future__ import annotations

import logging
import socket
from enum import IntEnum
from typing import Iterable, Optional, Sequence, Union

_log = logging.getLogger(__name__)

DEFAULT_UDP_PORT = 21324

Color = Sequence[float]


class UdpProtocol(IntEnum):
    """Realtime UDP packet formats understood by WLED-style controllers."""

    WARLS = 0x01
    DRGB = 0x02
    DRGBW = 0x03
    DNRGB = 0x04


DEFAULT_PROTOCOL = UdpProtocol.DNRGB

# Bytes of LED start index that follow the header for each protocol.
_LED_OFFSET = {
    UdpProtocol.WARLS: b"\x00",
    UdpProtocol.DNRGB: b"\x00\x00",
}


def _channel_byte(value: float) -> int:
    return max(0, min(255, int(value * 255)))


def colors_to_bytes(colors: Iterable[Color]) -> bytes:
    """Flatten RGB colours with channels in 0..1 into one byte per channel."""
    out = bytearray()
    for color in colors:
        red, green, blue = color[0], color[1], color[2]
        out.extend((_channel_byte(red), _channel_byte(green), _channel_byte(blue)))
    return bytes(out)


def _resolve_protocol(protocol: Union[UdpProtocol, int, str, None]) -> Optional[UdpProtocol]:
    if protocol is None:
        return None
    if isinstance(protocol, str):
        return UdpProtocol.__members__.get(protocol.upper())
    if protocol == 0:
        return None
    return UdpProtocol(protocol)


class UdpDevice:
    """An LED controller driven by realtime UDP packets."""

    def __init__(
        self,
        name: str,
        ip_address: str,
        port: int = DEFAULT_UDP_PORT,
        protocol: Union[UdpProtocol, int, str, None] = None,
    ) -> None:
        self.name = name
        self.ip_address = ip_address
        self.port = port
        self.protocol = _resolve_protocol(protocol)
        self._conn: Optional[socket.socket] = None

    def init(self) -> None:
        """Open a UDP socket connected to the controller."""
        family, kind, proto, _, target = socket.getaddrinfo(
            self.ip_address, self.port, type=socket.SOCK_DGRAM
        )[0]
        conn = socket.socket(family, kind, proto)
        try:
            conn.connect(target)
        except OSError:
            conn.close()
            raise
        self._conn = conn
        _log.debug("Established connection to %s:%d", self.ip_address, self.port)
        _log.debug("Local UDP client address: %s", conn.getsockname())

    def close(self) -> None:
        """Close the socket."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def build_packet(self, colors: Iterable[Color], timeout: int) -> bytes:
        """Build one realtime packet; ``timeout`` is seconds before the device resumes."""
        if not 0 <= timeout <= 255:
            raise ValueError(f"timeout must fit in one byte, got {timeout}")
        if self.protocol is None:
            self.protocol = DEFAULT_PROTOCOL
        header = bytes((int(self.protocol), timeout))
        return header + _LED_OFFSET.get(self.protocol, b"") + colors_to_bytes(colors)

    def send_data(self, colors: Iterable[Color], timeout: int) -> None:
        """Send one frame of colours to the device."""
        if self._conn is None:
            raise RuntimeError("device must first be initialized")
        self._conn.send(self.build_packet(colors, timeout))

    def __enter__(self) -> "UdpDevice":
        self.init()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()