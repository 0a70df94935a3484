"""A minimal RTSP client speaking over one TCP connection."""

from __future__ import annotations

import socket
import threading

from ledfx.rtsp_parser import read_response, write_request
from ledfx.rtsp_types import Request, Response

USER_AGENT = "Bobcaygeon/1.0"


class RtspClient:
    """Sends RTSP requests to one server and reads its responses."""

    def __init__(self, address: str, port: int) -> None:
        self._sock = socket.create_connection((address, port))
        self._rfile = self._sock.makefile("rb")
        self._wfile = self._sock.makefile("wb")
        self._seq = 1
        self._lock = threading.Lock()
        self._local_addr = self._sock.getsockname()[0]
        self._remote_addr = self._sock.getpeername()[0]

    def send(self, request: Request) -> Response:
        """Send ``request`` with the next CSeq and return the server's response."""
        with self._lock:
            request.headers["CSeq"] = str(self._seq)
            request.headers["User-Agent"] = USER_AGENT
            self._seq += 1
            write_request(self._wfile, request)
            return read_response(self._rfile)

    def local_address(self) -> str:
        """Our side of the connection."""
        return self._local_addr

    def remote_address(self) -> str:
        """The server's side of the connection."""
        return self._remote_addr

    def close(self) -> None:
        """Close the connection."""
        self._rfile.close()
        self._wfile.close()
        self._sock.close()

    def __enter__(self) -> "RtspClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()