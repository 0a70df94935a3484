"""RTSP methods, status codes and message types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Method(IntEnum):
    """RTSP request methods."""

    label: str

    def __new__(cls, value: int, label: str):
        member = int.__new__(cls, value)
        member._value_ = value
        member.label = label
        return member

    DESCRIBE = 0, "Describe"
    ANNOUNCE = 1, "Announce"
    GET_PARAMETER = 2, "Get_Parameter"
    OPTIONS = 3, "Options"
    PLAY = 4, "Play"
    PAUSE = 5, "Pause"
    RECORD = 6, "Record"
    REDIRECT = 7, "Redirect"
    SETUP = 8, "Setup"
    SET_PARAMETER = 9, "Set_Parameter"
    TEARDOWN = 10, "Teardown"
    FLUSH = 11, "Flush"

    def __str__(self) -> str:
        return self.label


class Status(IntEnum):
    """RTSP response status codes."""

    label: str

    def __new__(cls, value: int, label: str):
        member = int.__new__(cls, value)
        member._value_ = value
        member.label = label
        return member

    CONTINUE = 100, "Continue"
    OK = 200, "Ok"
    CREATED = 201, "Created"
    LOW_ON_STORAGE = 250, "LowOnStorage"
    MULTIPLE_CHOICES = 300, "MultipleChoices"
    MOVED_PERMANENTLY = 301, "MovedPermanently"
    MOVED_TEMP = 301, "MovedPermanently"
    SEE_OTHER = 303, "SeeOther"
    USE_PROXY = 305, "UseProxy"
    BAD_REQUEST = 400, "BadRequest"
    UNAUTHORIZED = 401, "Unauthorized"
    PAYMENT_REQUIRED = 402, "PaymentRequired"
    FORBIDDEN = 403, "Forbidden"
    NOT_FOUND = 404, "NotFound"
    METHOD_NOT_ALLOWED = 405, "MethodNotAllowed"
    NOT_ACCEPTABLE = 406, "NotAcceptable"
    PROXY_AUTHENTICATION_REQUIRED = 407, "ProxyAuthenticationRequired"
    REQUEST_TIMEOUT = 408, "RequestTimeout"
    GONE = 410, "Gone"
    LENGTH_REQUIRED = 411, "LengthRequired"
    PRECONDITION_FAILED = 412, "PreconditionFailed"
    REQUEST_ENTITY_TOO_LARGE = 413, "RequestEntityTooLarge"
    REQUEST_URI_TOO_LONG = 414, "RequestURITooLong"
    UNSUPPORTED_MEDIA_TYPE = 415, "UnsupportedMediaType"
    INVALID_PARAMETER = 451, "Invalidparameter"
    ILLEGAL_CONFERENCE_IDENTIFIER = 452, "IllegalConferenceIdentifier"
    NOT_ENOUGH_BANDWIDTH = 453, "NotEnoughBandwidth"
    SESSION_NOT_FOUND = 454, "SessionNotFound"
    METHOD_NOT_VALID_IN_THIS_STATE = 455, "MethodNotValidInThisState"
    HEADER_FIELD_NOT_VALID = 456, "HeaderFieldNotValid"
    INVALID_RANGE = 457, "InvalidRange"
    PARAMETER_IS_READ_ONLY = 458, "ParameterIsReadOnly"
    AGGREGATE_OPERATION_NOT_ALLOWED = 459, "AggregateOperationNotAllowed"
    ONLY_AGGREGATE_OPERATION_ALLOWED = 460, "OnlyAggregateOperationAllowed"
    UNSUPPORTED_TRANSPORT = 461, "UnsupportedTransport"
    DESTINATION_UNREACHABLE = 462, "DestinationUnreachable"
    INTERNAL_SERVER_ERROR = 500, "InternalServerError"
    NOT_IMPLEMENTED = 501, "NotImplemented"
    BAD_GATEWAY = 502, "BadGateway"
    SERVICE_UNAVAILABLE = 503, "ServiceUnavailable"
    GATEWAY_TIMEOUT = 504, "GatewayTimeout"
    RTSP_VERSION_NOT_SUPPORTED = 505, "RTSPVersionNotSupported"
    OPTION_NOT_SUPPORTED = 551, "Optionnotsupport"

    def __str__(self) -> str:
        return self.label


# Redirect is deliberately not accepted from the wire.
_METHODS: dict[str, Method] = {
    m.label.lower(): m for m in Method if m is not Method.REDIRECT
}


def get_method(name: str) -> Method:
    """Look up a method by name, ignoring case; raise ValueError if unknown."""
    try:
        return _METHODS[name.lower()]
    except KeyError:
        raise ValueError(f"Not valid method: {name}") from None


def get_methods() -> list[str]:
    """All accepted RTSP method names, upper case."""
    return [name.upper() for name in _METHODS]


def get_status(code: int) -> Status:
    """Look up a status by its numeric code; raise ValueError if unknown."""
    try:
        return Status(code)
    except ValueError:
        raise ValueError(f"Not valid status: {code}") from None


def format_headers(headers: dict[str, str]) -> str:
    """Render headers as ``[key:value], [key:value]``."""
    return ", ".join(f"[{key}:{value}]" for key, value in headers.items())


def _contains_ignore_case(text: str, fragment: str) -> bool:
    return fragment.casefold() in text.casefold()


def _describe_body(headers: dict[str, str], body: bytes) -> str:
    content_type = headers.get("Content-Type")
    if content_type is None:
        return ""
    if _contains_ignore_case(content_type, "image") or _contains_ignore_case(
        content_type, "x-dmap-tagged"
    ):
        return " BODY=[<omitted due to length>]"
    text = body.decode("utf-8", errors="replace").replace("\n", "")
    return f" BODY=[{text}]"


@dataclass
class Request:
    """An RTSP request."""

    method: Method = Method.DESCRIBE
    request_uri: str = ""
    protocol: str = "RTSP/1.0"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __str__(self) -> str:
        return (
            f'PROTO="{self.protocol}" METHOD="{self.method.label}" '
            f'URI="{self.request_uri}" HEADERS="{format_headers(self.headers)}"'
            + _describe_body(self.headers, self.body)
        )


@dataclass
class Response:
    """An RTSP response."""

    status: Status = Status.OK
    protocol: str = "RTSP/1.0"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __str__(self) -> str:
        return (
            f'PROTO="{self.protocol}" STATUS="{self.status.label}" '
            f'HEADERS="{format_headers(self.headers)}"'
            + _describe_body(self.headers, self.body)
        )