import logging
from collections.abc import Callable
from enum import StrEnum

import requests

from .logs import request_repr
from .requests_factory import RequestDescriptor

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = {"Authorization"}


class Stage(StrEnum):
    construct = "construct"
    perform = "perform"
    read = "read"


_STAGE_MESSAGES = {
    Stage.construct: "Failed to create request",
    Stage.perform: "Failed to perform request",
    Stage.read: "Failed to read response body",
}


class DispatchError(Exception):
    def __init__(self, stage: Stage, url: str, cause: Exception) -> None:
        self.stage = stage
        self.url = url
        self.cause = cause
        super().__init__(f"{_STAGE_MESSAGES[stage]}: {cause}")


class HttpClient:
    """Sends a single request and reads the whole response into memory.

    Non-2xx responses are returned like any other; only failures to build
    the request, reach the server or read the body raise ``DispatchError``.
    """

    def __init__(
        self,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        self._session_factory = session_factory

    def send(self, descriptor: RequestDescriptor) -> requests.Response:
        try:
            prepared_request = descriptor.build().prepare()
        except (requests.RequestException, ValueError) as error:
            raise DispatchError(Stage.construct, descriptor.url, error) from error

        logger.info(
            "Sending request: %s",
            request_repr(
                method=descriptor.method,
                url=descriptor.url,
                headers=descriptor.headers,
                body=descriptor.body,
                sensitive_headers=SENSITIVE_HEADERS,
            ),
        )

        with self._session_factory() as session:
            try:
                response = session.send(prepared_request, stream=True)
            except requests.RequestException as error:
                raise DispatchError(Stage.perform, descriptor.url, error) from error

            with response:
                try:
                    content = response.content
                except requests.RequestException as error:
                    raise DispatchError(Stage.read, descriptor.url, error) from error

        logger.info(
            "Server responded: HTTP %s (%d bytes)",
            response.status_code,
            len(content),
        )

        return response
