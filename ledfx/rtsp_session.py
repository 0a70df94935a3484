"""An RTSP streaming session carrying audio packets over UDP."""

from __future__ import annotations

import logging
import queue
import socket
import threading
from dataclasses import dataclass
from typing import Optional, Protocol

from ledfx.sdp import SessionDescription

_log = logging.getLogger(__name__)

READ_BUFFER = 2048
_QUEUE_SIZE = 1000
_POLL_INTERVAL = 0.1


class Decrypter(Protocol):
    """Turns a received packet into its plain payload."""

    def decode(self, data: bytes) -> bytes: ...


@dataclass
class PortSet:
    """The ports used by one side of an RTSP stream."""

    address: str = ""
    control: int = 0
    timing: int = 0
    data: int = 0


class Session:
    """A streaming session.

    Received packets are put on ``data_queue``; ``None`` marks the end of the stream.
    """

    def __init__(
        self, description: SessionDescription, decrypter: Optional[Decrypter] = None
    ) -> None:
        self.description = description
        self.decrypter = decrypter
        self.remote_ports = PortSet()
        self.local_ports = PortSet()
        self.data_queue: "queue.Queue[Optional[bytes]]" = queue.Queue(maxsize=_QUEUE_SIZE)
        self._conn: Optional[socket.socket] = None
        self._stop = threading.Event()
        self._receiver: Optional[threading.Thread] = None

    def init_receive(self) -> None:
        """Open a UDP socket on a free port for receiving data."""
        conn = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        conn.bind(("", 0))
        self._conn = conn
        self.local_ports.data = conn.getsockname()[1]

    def start_receiving(self) -> None:
        """Start receiving packets in the background."""
        if self._conn is None:
            raise RuntimeError("session must be initialised for receiving first")
        _log.info("Session started. Listening for audio packets...")
        self._conn.settimeout(_POLL_INTERVAL)
        self._receiver = threading.Thread(target=self._receive, daemon=True)
        self._receiver.start()

    def _receive(self) -> None:
        conn = self._conn
        try:
            while not self._stop.is_set():
                try:
                    packet, _ = conn.recvfrom(READ_BUFFER)
                except socket.timeout:
                    continue
                except OSError as exc:
                    _log.warning("Error reading data from socket: %s", exc)
                    break
                if self.decrypter is not None:
                    try:
                        packet = self.decrypter.decode(packet)
                    except Exception as exc:
                        _log.error("Error decrypting packet: %s", exc)
                        break
                self.data_queue.put(bytes(packet))
        finally:
            _log.info("Signalling session is closed")
            self.data_queue.put(None)

    def start_sending(self) -> None:
        """Connect a UDP socket to the remote data port for sending."""
        address, port = self.remote_ports.address, self.remote_ports.data
        try:
            family, kind, proto, _, target = socket.getaddrinfo(
                address, port, type=socket.SOCK_DGRAM
            )[0]
            conn = socket.socket(family, kind, proto)
            conn.connect(target)
        except OSError as exc:
            raise OSError(f"error dialing '{address}:{port}': {exc}") from exc
        self._conn = conn
        _log.info("Sending session started successfully")

    def close(self) -> None:
        """Stop receiving, wait for the receiver to finish and close the socket."""
        _log.info("Closing session...")
        self._stop.set()
        if self._receiver is not None:
            self._receiver.join()
            self._receiver = None
        if self._conn is not None:
            self._conn.close()
        else:
            _log.info("Currently no data connection...")

    def data_conn(self) -> Optional[socket.socket]:
        """The session's UDP socket, if one is open."""
        return self._conn