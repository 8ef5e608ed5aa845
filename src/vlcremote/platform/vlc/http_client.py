"""Where: src/vlcremote/platform/vlc/http_client.py
What: Blocking HTTP GET adapter with Basic authentication for the VLC web UI.
Why: Decouple network concerns from command construction and decoding.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol

import requests
from requests.auth import HTTPBasicAuth

from vlcremote.domain.errors import (
    NetworkError,
    RequestConstructionError,
    UnexpectedStatusError,
)
from vlcremote.platform.logging import logger


@dataclass(frozen=True, slots=True)
class RequestAuth:
    """HTTP Basic credentials. VLC only checks the password."""

    username: str = ""
    password: str = ""

    def __repr__(self) -> str:
        return f"RequestAuth(username={self.username!r}, password='***')"


class Transport(Protocol):
    """Anything able to GET an endpoint relative to a fixed base URL."""

    def get(self, endpoint: str) -> bytes:
        ...


class HTTPTransport:
    """Perform single GET requests against ``{base_url}/{endpoint}``.

    No retries are attempted. ``timeout`` is handed to ``requests`` as is;
    ``None`` waits indefinitely.
    """

    def __init__(
        self,
        base_url: str,
        auth: RequestAuth | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url: str = base_url
        self._auth: RequestAuth = auth or RequestAuth()
        self._timeout: float | None = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def auth(self) -> RequestAuth:
        return self._auth

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def get(self, endpoint: str) -> bytes:
        """Return the response body of ``GET {base_url}/{endpoint}``.

        Raises:
            RequestConstructionError: The URL cannot be turned into a request.
            NetworkError: The request could not be completed.
            UnexpectedStatusError: The status code is outside 200-299.
        """
        prepared = self._prepare(endpoint)

        logger.debug(
            "GET %s",
            endpoint,
            extra={"request_event": "request.start", "endpoint": endpoint},
        )
        started = time.perf_counter()
        try:
            with requests.Session() as session:
                response = session.send(prepared, timeout=self._timeout)
                body = response.content
        except requests.exceptions.InvalidSchema as exc:
            raise RequestConstructionError(f"unable to create request, {exc}") from exc
        except requests.exceptions.RequestException as exc:
            logger.warning(
                "Request to %s failed: %s",
                endpoint,
                exc,
                extra={
                    "request_event": "request.error",
                    "endpoint": endpoint,
                    "error_message": str(exc),
                },
            )
            raise NetworkError(f"unable to execute request, {exc}") from exc

        duration_ms = (time.perf_counter() - started) * 1000
        status_code = int(response.status_code)
        if not _is_ok_response(status_code):
            logger.warning(
                "Request to %s returned status %s",
                endpoint,
                status_code,
                extra={
                    "request_event": "request.error",
                    "endpoint": endpoint,
                    "status_code": status_code,
                    "duration_ms": duration_ms,
                },
            )
            raise UnexpectedStatusError(status_code, endpoint)

        logger.debug(
            "GET %s -> %s",
            endpoint,
            status_code,
            extra={
                "request_event": "request.success",
                "endpoint": endpoint,
                "status_code": status_code,
                "response_bytes": len(body),
                "duration_ms": duration_ms,
            },
        )
        return body

    def _prepare(self, endpoint: str) -> requests.PreparedRequest:
        url = f"{self._base_url}/{endpoint}"
        request = requests.Request(
            "GET",
            url,
            auth=HTTPBasicAuth(self._auth.username, self._auth.password),
        )
        try:
            return request.prepare()
        except (requests.exceptions.RequestException, ValueError) as exc:
            raise RequestConstructionError(f"unable to create request, {exc}") from exc


def _is_ok_response(code: int) -> bool:
    return 200 <= code <= 299


__all__ = ["HTTPTransport", "RequestAuth", "Transport"]
