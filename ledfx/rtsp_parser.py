"""Reading and writing RTSP requests and responses on byte streams."""

from __future__ import annotations

from typing import BinaryIO

from ledfx.rtsp_types import Request, Response, get_method, get_status


class RtspParseError(ValueError):
    """Raised when an RTSP message on the wire is malformed."""


def _read_line(stream: BinaryIO) -> str:
    line = stream.readline()
    if not line.endswith(b"\n"):
        raise EOFError("unexpected end of stream")
    return line.decode("utf-8", errors="replace")


def _read_headers(stream: BinaryIO) -> dict[str, str]:
    headers: dict[str, str] = {}
    while True:
        header_field = _read_line(stream).strip("\r\n")
        if not header_field:
            return headers
        parts = header_field.split(":")
        if len(parts) < 2:
            raise RtspParseError(f"improper header: {header_field}")
        headers[parts[0].strip()] = parts[1].strip()


def read_request(stream: BinaryIO) -> Request:
    """Read one RTSP request; raise EOFError when the stream ends first."""
    request_line = _read_line(stream).strip("\r\n")
    parts = request_line.split(" ")
    if len(parts) != 3:
        raise RtspParseError(f"improperly formatted request line: {request_line}")
    try:
        method = get_method(parts[0])
    except ValueError:
        raise RtspParseError(f"method does not exist in RTSP protocol: {parts[0]}") from None

    headers = _read_headers(stream)
    request = Request(method=method, request_uri=parts[1], protocol=parts[2], headers=headers)

    content_length = headers.get("Content-Length")
    if content_length is None:
        return request
    try:
        length = int(content_length)
    except ValueError:
        length = 0
    # A body cut short by the end of the stream is accepted as it is.
    request.body = stream.read(length) if length > 0 else b""
    return request


def read_response(stream: BinaryIO) -> Response:
    """Read one RTSP response; raise EOFError when the stream ends first."""
    status_line = _read_line(stream).strip("\r\n")
    parts = status_line.split(" ", 2)
    if len(parts) != 3:
        raise RtspParseError(f"improperly formatted status line: {status_line}")
    try:
        code = int(parts[1])
    except ValueError:
        raise RtspParseError(f"status not a valid integer: {parts[1]}") from None
    try:
        status = get_status(code)
    except ValueError:
        raise RtspParseError(f"status does not exist in RTSP protocol: {code}") from None

    headers = _read_headers(stream)
    response = Response(status=status, protocol=parts[0], headers=headers)

    content_length = headers.get("Content-Length")
    if content_length is None:
        return response
    try:
        length = int(content_length)
    except ValueError:
        raise RtspParseError(
            f"unable to parse header 'Content-Length' (string: {content_length})"
        ) from None
    body = stream.read(length) if length > 0 else b""
    if len(body) < length:
        raise RtspParseError(
            f"error reading body into buffer: expected {length} bytes, got {len(body)}"
        )
    response.body = body
    return response


def _encode(first_line: str, headers: dict[str, str], body: bytes) -> bytes:
    lines = [first_line]
    lines.extend(f"{name}: {value}" for name, value in headers.items())
    if body:
        lines.append(f"Content-Length: {len(body)}")
    head = "".join(line + "\r\n" for line in lines) + "\r\n"
    return head.encode("utf-8") + body


def _write(stream: BinaryIO, data: bytes) -> int:
    stream.write(data)
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()
    return len(data)


def write_request(stream: BinaryIO, request: Request) -> int:
    """Write ``request`` to ``stream``; return the number of bytes written."""
    first_line = f"{request.method.label.upper()} {request.request_uri} {request.protocol}"
    return _write(stream, _encode(first_line, request.headers, request.body))


def write_response(stream: BinaryIO, response: Response) -> int:
    """Write ``response`` to ``stream``; return the number of bytes written."""
    status = response.status
    first_line = f"{response.protocol} {int(status)} {status.label}"
    return _write(stream, _encode(first_line, response.headers, response.body))