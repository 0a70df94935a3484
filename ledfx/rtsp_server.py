"""A threaded RTSP server dispatching requests to per-method handlers."""

from __future__ import annotations

import logging
import socket
import threading
from typing import Callable, Optional

from ledfx.rtsp_parser import RtspParseError, read_request, write_response
from ledfx.rtsp_types import Method, Request, Response, Status

_log = logging.getLogger(__name__)

RequestHandler = Callable[[Request, Response, str, str], None]

_POLL_INTERVAL = 0.2
# A documentation-only address; connecting a UDP socket to it sends nothing.
_PROBE_ADDRESS = ("192.0.2.1", 9)


def _likely_local_ip() -> str:
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
        try:
            probe.connect(_PROBE_ADDRESS)
        except OSError as exc:
            raise OSError(f"error getting local outbound IP address: {exc}") from exc
        return probe.getsockname()[0]


class RtspServer:
    """Accepts RTSP connections and answers them with registered handlers."""

    def __init__(self, port: int, host: Optional[str] = None) -> None:
        self.port = port
        self.host = host
        self._handlers: dict[Method, RequestHandler] = {}
        self._listener: Optional[socket.socket] = None
        self._accept_thread: Optional[threading.Thread] = None
        self._stop = threading.Event()
        self._done = threading.Event()
        self._connections: set[socket.socket] = set()
        self._lock = threading.Lock()
        self._verbose = False

    def add_handler(self, method: Method, handler: RequestHandler) -> None:
        """Register ``handler`` for requests using ``method``."""
        self._handlers[method] = handler

    def start(self, verbose: bool = False) -> None:
        """Bind the listening socket and start accepting connections."""
        self._verbose = verbose
        if self.host is None:
            self.host = _likely_local_ip()
        family = socket.AF_INET6 if ":" in self.host else socket.AF_INET
        listener = socket.create_server((self.host, self.port), family=family)
        listener.settimeout(_POLL_INTERVAL)
        self.port = listener.getsockname()[1]
        self._listener = listener
        self._stop.clear()
        self._done.clear()
        _log.info("Starting RTSP server on address: %s:%d", self.host, self.port)
        self._accept_thread = threading.Thread(target=self._accept_loop, daemon=True)
        self._accept_thread.start()

    def _accept_loop(self) -> None:
        listener = self._listener
        while not self._stop.is_set():
            try:
                conn, _ = listener.accept()
            except socket.timeout:
                continue
            except OSError as exc:
                if not self._stop.is_set():
                    _log.warning("Error accepting: %s", exc)
                return
            conn.settimeout(None)
            threading.Thread(target=self._serve_connection, args=(conn,), daemon=True).start()

    def _serve_connection(self, conn: socket.socket) -> None:
        with self._lock:
            self._connections.add(conn)
        try:
            with conn, conn.makefile("rb") as rfile, conn.makefile("wb") as wfile:
                local_addr = conn.getsockname()[0]
                remote_addr = conn.getpeername()[0]
                while True:
                    try:
                        request = read_request(rfile)
                    except EOFError:
                        _log.info("Client '%s' closed connection", remote_addr)
                        return
                    except (RtspParseError, OSError) as exc:
                        _log.error("Error reading data: %s", exc)
                        return

                    if self._verbose:
                        _log.info("REQUEST %s", request)

                    handler = self._handlers.get(request.method)
                    if handler is None:
                        _log.info(
                            "Method '%s' does not have a handler. Skipping", request.method
                        )
                        continue

                    response = Response(
                        protocol=request.protocol,
                        headers={"CSeq": request.headers.get("CSeq", "")},
                    )
                    try:
                        handler(request, response, local_addr, remote_addr)
                    except Exception:
                        _log.exception("Handler for %s failed", request.method)
                        response.status = Status.INTERNAL_SERVER_ERROR

                    if self._verbose:
                        _log.info("RESPONSE %s", response)
                    try:
                        write_response(wfile, response)
                    except OSError as exc:
                        _log.error("Error writing response: %s", exc)
                        return
        except OSError as exc:
            _log.error("Connection error: %s", exc)
        finally:
            with self._lock:
                self._connections.discard(conn)

    def stop(self) -> None:
        """Stop accepting, drop open connections and release ``wait``."""
        _log.info("Stopping RTSP server")
        self._stop.set()
        if self._accept_thread is not None:
            self._accept_thread.join()
            self._accept_thread = None
        if self._listener is not None:
            self._listener.close()
            self._listener = None
        with self._lock:
            connections = list(self._connections)
        for conn in connections:
            try:
                conn.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
        self._done.set()

    def wait(self) -> None:
        """Block until the server has been stopped."""
        self._done.wait()