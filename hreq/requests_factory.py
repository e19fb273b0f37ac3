import re
from collections.abc import Iterable
from dataclasses import dataclass, field

import requests
from requests import Request

from .environments import DEFAULT_ENVIRONMENTS, DEFAULT_PORT, Environments, resolve_url
from .forms import normalize_body
from .httptypes import Headers
from .schemas import BodyMode

# RFC 9110 token
_TOKEN_PATTERN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


class InvalidHeaderError(ValueError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid header format {value!r}, should be key:value")
        self.value = value


class InvalidMethodError(ValueError):
    def __init__(self, method: str) -> None:
        super().__init__(f"Invalid HTTP method: {method!r}")
        self.method = method


class InvalidHeaderNameError(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid header name: {name!r}")
        self.name = name


def parse_header(value: str) -> tuple[str, str]:
    key, separator, header_value = value.partition(":")

    if not separator:
        raise InvalidHeaderError(value)

    return key.strip(), header_value.strip()


def parse_headers(values: Iterable[str]) -> Headers:
    headers: Headers = {}

    for value in values:
        key, header_value = parse_header(value)
        headers[key] = header_value

    return headers


def set_header(headers: Headers, name: str, value: str) -> None:
    """Set ``name``, replacing any header that differs from it only in case."""
    for existing in [key for key in headers if key.lower() == name.lower()]:
        del headers[existing]

    headers[name] = value


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    url: str
    body: str = ""
    headers: Headers = field(default_factory=dict)

    def build(self) -> Request:
        if not _TOKEN_PATTERN.fullmatch(self.method):
            raise InvalidMethodError(self.method)

        for name in self.headers:
            if not _TOKEN_PATTERN.fullmatch(name):
                raise InvalidHeaderNameError(name)

        return requests.Request(
            method=self.method,
            url=self.url,
            # values go out as UTF-8 bytes, not latin-1
            headers={name: value.encode() for name, value in self.headers.items()},
            data=self.body.encode() if self.body else None,
        )


class RequestFactory:
    def __init__(
        self,
        environments: Environments = DEFAULT_ENVIRONMENTS,
        body_mode: BodyMode = BodyMode.auto,
    ) -> None:
        self.environments = environments
        self.body_mode = body_mode

    def create_request(  # noqa: PLR0913
        self,
        host: str,
        path: str = "",
        method: str = "GET",
        port: int = DEFAULT_PORT,
        data: str | None = None,
        json_body: str | None = None,
        token: str | None = None,
        headers: Headers | None = None,
    ) -> RequestDescriptor:
        request_headers: Headers = dict(headers or {})

        if token:
            # sent verbatim, no "Bearer " prefix
            set_header(request_headers, "Authorization", token)

        body = normalize_body(
            data=data,
            json_body=json_body,
            method=method,
            mode=self.body_mode,
        )

        if body is not None and body.content_type is not None:
            set_header(request_headers, "Content-Type", body.content_type)

        return RequestDescriptor(
            method=method,
            url=resolve_url(host, port, path, self.environments),
            body=body.content if body is not None else "",
            headers=request_headers,
        )
