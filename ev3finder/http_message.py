"""HTTP request and response objects and their text form."""

from __future__ import annotations

import enum
from typing import Dict, Optional

from ev3finder.uri import Uri

_WHITESPACE = " \t\n\r\f\v"


class HttpMethod(enum.Enum):
    """Request methods understood by the server."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    def __str__(self) -> str:
        return self.value


class HttpVersion(enum.Enum):
    """Protocol versions; only HTTP/1.1 is accepted in requests."""

    HTTP_0_9 = 9
    HTTP_1_0 = 10
    HTTP_1_1 = 11
    HTTP_2_0 = 20

    @property
    def text(self) -> str:
        return _VERSION_TEXT[self]

    def __str__(self) -> str:
        return self.text


_VERSION_TEXT = {
    HttpVersion.HTTP_0_9: "HTTP/0.9",
    HttpVersion.HTTP_1_0: "HTTP/1.0",
    HttpVersion.HTTP_1_1: "HTTP/1.1",
    HttpVersion.HTTP_2_0: "HTTP/2.0",
}


class HttpStatusCode(enum.IntEnum):
    """Response status codes."""

    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101
    EARLY_HINTS = 103
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFORMATION = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206
    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    NOT_MODIFIED = 304
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    REQUEST_TIMEOUT = 408
    IM_A_TEAPOT = 418
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505


_REASONS = {
    HttpStatusCode.CONTINUE: "Continue",
    HttpStatusCode.OK: "OK",
    HttpStatusCode.ACCEPTED: "Accepted",
    HttpStatusCode.MOVED_PERMANENTLY: "Moved Permanently",
    HttpStatusCode.FOUND: "Found",
    HttpStatusCode.BAD_REQUEST: "Bad Request",
    HttpStatusCode.FORBIDDEN: "Forbidden",
    HttpStatusCode.NOT_FOUND: "Not Found",
    HttpStatusCode.METHOD_NOT_ALLOWED: "Method Not Allowed",
    HttpStatusCode.IM_A_TEAPOT: "I'm a Teapot",
    HttpStatusCode.INTERNAL_SERVER_ERROR: "Internal Server Error",
    HttpStatusCode.NOT_IMPLEMENTED: "Not Implemented",
    HttpStatusCode.BAD_GATEWAY: "Bad Gateway",
}


class HttpVersionNotSupportedError(Exception):
    """A request used a protocol version other than HTTP/1.1."""


def status_reason(status: HttpStatusCode) -> str:
    """Reason phrase for ``status``; empty for codes without a known phrase."""
    return _REASONS.get(status, "")


def method_from_string(text: str) -> HttpMethod:
    """Case-insensitive lookup of a request method; raises ``ValueError``."""
    try:
        return HttpMethod(text.upper())
    except ValueError:
        raise ValueError("Unexpected HTTP method") from None


def version_from_string(text: str) -> HttpVersion:
    """Case-insensitive lookup of a protocol version; raises ``ValueError``."""
    upper = text.upper()
    if upper == "HTTP/2":
        return HttpVersion.HTTP_2_0
    for version, name in _VERSION_TEXT.items():
        if name == upper:
            return version
    raise ValueError("Unexpected HTTP version")


class HttpMessage:
    """Version, header fields and content shared by requests and responses."""

    def __init__(self) -> None:
        self.version = HttpVersion.HTTP_1_1
        self._headers: Dict[str, str] = {}
        self._content = ""

    def set_header(self, key: str, value: str) -> None:
        self._headers[key] = value

    def remove_header(self, key: str) -> None:
        self._headers.pop(key, None)

    def clear_headers(self) -> None:
        self._headers.clear()

    def set_content(self, content: str) -> None:
        """Replace the content and update ``Content-Length``."""
        self._content = content
        self._update_content_length()

    def clear_content(self) -> None:
        """Empty the content and update ``Content-Length``."""
        self._content = ""
        self._update_content_length()

    def header(self, key: str) -> str:
        """Value of a header field, or an empty string when it is absent."""
        return self._headers.get(key, "")

    @property
    def headers(self) -> Dict[str, str]:
        """Copy of the header fields."""
        return dict(self._headers)

    @property
    def content(self) -> str:
        return self._content

    @property
    def content_length(self) -> int:
        return len(self._content)

    def _update_content_length(self) -> None:
        self.set_header("Content-Length", str(len(self._content)))

    def _header_block(self) -> str:
        return "".join(f"{key}: {value}\r\n" for key, value in sorted(self._headers.items()))


class HttpRequest(HttpMessage):
    """A single request: method and URI plus the shared message parts."""

    def __init__(self, method: HttpMethod = HttpMethod.GET, uri: Optional[Uri] = None) -> None:
        super().__init__()
        self.method = method
        self.uri = uri if uri is not None else Uri()


class HttpResponse(HttpMessage):
    """A single response with a status code."""

    def __init__(self, status_code: HttpStatusCode = HttpStatusCode.OK) -> None:
        super().__init__()
        self.status_code = status_code


def request_to_string(request: HttpRequest) -> str:
    """Wire form of a request, headers in key order."""
    return (
        f"{request.method} {request.uri.path} {request.version}\r\n"
        f"{request._header_block()}\r\n{request.content}"
    )


def response_to_string(response: HttpResponse, send_content: bool = True) -> str:
    """Wire form of a response; the content is left out unless ``send_content``."""
    status = response.status_code
    text = (
        f"{response.version} {int(status)} {status_reason(status)}\r\n"
        f"{response._header_block()}\r\n"
    )
    return text + response.content if send_content else text


def _strip_whitespace(text: str) -> str:
    return "".join(ch for ch in text if ch not in _WHITESPACE)


def parse_request(text: str) -> HttpRequest:
    """Parse the wire form of a request.

    Raises ``ValueError`` for malformed input and
    ``HttpVersionNotSupportedError`` for versions other than HTTP/1.1.
    """
    end = text.find("\r\n")
    if end == -1:
        raise ValueError("Could not find request start line")
    start_line = text[:end]
    pos = end + 2

    header_text = ""
    body = ""
    header_end = text.find("\r\n\r\n", pos)
    if header_end != -1:
        header_text = text[pos:header_end]
        body = text[header_end + 4:]

    tokens = start_line.split() + ["", "", ""]
    method_text, path, version_text = tokens[:3]

    request = HttpRequest(method_from_string(method_text), Uri(path))
    if version_from_string(version_text) != request.version:
        raise HttpVersionNotSupportedError("HTTP version not supported")

    if header_text:
        lines = header_text.split("\n")
        if header_text.endswith("\n"):
            lines.pop()
        for line in lines:
            key, _, value = line.partition(":")
            request.set_header(_strip_whitespace(key), _strip_whitespace(value))

    request.set_content(body)
    return request