"""Setting up an outgoing RAOP stream by RTSP handshake."""

from __future__ import annotations

import logging
import time
from enum import IntEnum
from typing import Callable

from ledfx.rtsp_client import RtspClient
from ledfx.rtsp_session import Session
from ledfx.rtsp_types import Method, Request, Response, Status
from ledfx.sdp import ConnectData, MediaDescription, Origin, SessionDescription, Timing, serialize

_log = logging.getLogger(__name__)

_TRANSPORT = (
    "RTP/AVP/UDP;unicast;interleaved=0-1;mode=record;control_port=8888;timing_port=8889"
)


class CodecType(IntEnum):
    """Audio codec announced to the receiver."""

    ALAC = 0
    PCM = 1


_RTPMAP = {
    CodecType.PCM: "96 PCM",
    CodecType.ALAC: "96 AppleLossless",
}


class HandshakeError(RuntimeError):
    """Raised when the receiver rejects a step of the RTSP handshake."""


def _send_ok(client: RtspClient, request: Request) -> Response:
    response = client.send(request)
    if response.status is not Status.OK:
        raise HandshakeError(
            f"non-ok status returned for {request.method.label.upper()}: {response.status}"
        )
    return response


def _session_uri(client: RtspClient, session: Session) -> str:
    return f"rtsp://{client.local_address()}/{session.description.origin.session_id}"


def _options(client: RtspClient, session: Session, codec: CodecType) -> None:
    _send_ok(client, Request(method=Method.OPTIONS, request_uri="*"))


def _announce(client: RtspClient, session: Session, codec: CodecType) -> None:
    session_id = str(int(time.time()))
    local_address = client.local_address()
    description = session.description
    description.origin = Origin(
        username="bcp",
        session_id=session_id,
        session_version="0",
        net_type="IN",
        addr_type="IP4",
        unicast_address=local_address,
    )
    description.connect_data = ConnectData(
        net_type="IN", addr_type="IP4", connection_address=local_address
    )
    description.timing = Timing(0, 0)
    description.media_descriptions = [
        MediaDescription(media="audio", port="0", proto="RTP/AVP", fmt="96")
    ]
    description.attributes = {"rtpmap": _RTPMAP[codec]}
    request = Request(
        method=Method.ANNOUNCE,
        request_uri=f"rtsp://{local_address}/{session_id}",
        headers={"Content-Type": "application/sdp"},
        body=serialize(description).encode("utf-8"),
    )
    _send_ok(client, request)


def _port_value(part: str) -> int:
    _, _, value = part.partition("=")
    try:
        return int(value)
    except ValueError:
        return 0


def _setup(client: RtspClient, session: Session, codec: CodecType) -> None:
    request = Request(
        method=Method.SETUP,
        request_uri=_session_uri(client, session),
        headers={"Transport": _TRANSPORT},
    )
    response = _send_ok(client, request)
    control = timing = server = 0
    for part in response.headers.get("Transport", "").split(";"):
        if "control_port" in part:
            control = _port_value(part)
        if "timing_port" in part:
            timing = _port_value(part)
        if "server_port" in part:
            server = _port_value(part)
    ports = session.remote_ports
    ports.address = client.remote_address()
    ports.control = control
    ports.timing = timing
    ports.data = server


def _record(client: RtspClient, session: Session, codec: CodecType) -> None:
    _send_ok(client, Request(method=Method.RECORD, request_uri=_session_uri(client, session)))


_HANDSHAKE: tuple[Callable[[RtspClient, Session, CodecType], None], ...] = (
    _options,
    _announce,
    _setup,
    _record,
)


def establish_session(ip: str, port: int, codec: CodecType) -> Session:
    """Run the RTSP handshake with a receiver and return a session ready for sending."""
    codec = CodecType(codec)
    with RtspClient(ip, port) as client:
        session = Session(SessionDescription(), None)
        session.remote_ports.address = client.remote_address()
        try:
            for step in _HANDSHAKE:
                step(client, session, codec)
        except Exception as exc:
            _log.error("Error encountered during RTSP handshaking: %s", exc)
            raise
    _log.info("done handshaking")
    return session