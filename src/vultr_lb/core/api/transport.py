"""
HTTP transport for the Vultr v2 REST API.

The resource clients only depend on the ``Transport`` protocol: ``build`` turns
a method, path, body and query string into a ``Request`` and ``execute`` sends
it and returns the decoded JSON object. ``VultrTransport`` is the aiohttp
implementation; tests substitute their own.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, runtime_checkable

import aiohttp

from ..exceptions import DecodeError, RemoteError, RequestBuildError, TransportError
from ..utils.user_agent import get_user_agent
from ..validation import validate_api_key_with_context
from .constants import DEFAULT_REQUEST_TIMEOUT, VULTR_API_BASE_URL

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Request:
    """A fully built API request. ``body`` is JSON text or None."""

    method: str
    path: str
    query: str = ""
    body: Optional[str] = None

    @property
    def target(self) -> str:
        """Path plus query string, relative to the API base URL."""
        return f"{self.path}?{self.query}" if self.query else self.path


@runtime_checkable
class Transport(Protocol):
    def build(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        query: str = "",
    ) -> Request: ...

    async def execute(self, request: Request) -> Optional[Dict[str, Any]]: ...


def build_request(
    method: str,
    path: str,
    body: Optional[Dict[str, Any]] = None,
    query: str = "",
) -> Request:
    """Serialize ``body`` to JSON and return the immutable ``Request``.

    Raises:
        RequestBuildError: If ``body`` is not JSON serializable.
    """
    payload = None
    if body is not None:
        try:
            payload = json.dumps(body)
        except (TypeError, ValueError) as e:
            raise RequestBuildError(
                f"Cannot serialize body for {method} {path}: {e}",
                {"method": method, "path": path},
            ) from e

    return Request(method=method.upper(), path=path, query=query, body=payload)


def _error_message(status: int, text: str) -> str:
    """Pull the server's message out of an error body, verbatim."""
    try:
        data = json.loads(text)
    except ValueError:
        return text.strip() or f"HTTP {status}"

    if isinstance(data, dict) and isinstance(data.get("error"), str):
        return data["error"]
    return text.strip() or f"HTTP {status}"


class VultrTransport:
    """
    aiohttp-backed transport for the Vultr API.

    Each request is sent exactly once. Cancelling the awaiting task aborts the
    in-flight request; ``timeout`` bounds every request on the session.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        resolved = validate_api_key_with_context("call the Vultr API", api_key)
        self.api_key = resolved.value
        self.api_key_source = resolved.source
        self.base_url = (base_url or VULTR_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else DEFAULT_REQUEST_TIMEOUT
        self.session: Optional[aiohttp.ClientSession] = None

        log.debug(f"Using Vultr API key from {self.api_key_source}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create an aiohttp session."""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                    "User-Agent": get_user_agent(),
                },
            )
        return self.session

    def build(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        query: str = "",
    ) -> Request:
        return build_request(method, path, body, query)

    async def execute(self, request: Request) -> Optional[Dict[str, Any]]:
        """Send ``request`` and return the decoded JSON object, if any.

        Raises:
            TransportError: The request did not produce an HTTP response.
            RemoteError: The API answered with a status of 400 or above.
            DecodeError: A successful response body is not a JSON object.
        """
        session = await self._get_session()
        url = f"{self.base_url}{request.target}"

        log.debug(f"REST Request: {request.method} {url}")

        try:
            async with session.request(
                request.method, url, data=request.body
            ) as response:
                raw = await response.read()
                log.debug(f"REST Response Status: {response.status}")
        except asyncio.TimeoutError as e:
            log.error(f"Request timed out: {request.method} {url}")
            raise TransportError(
                request.method, url, f"timed out after {self.timeout}s"
            ) from e
        except aiohttp.ClientError as e:
            log.error(f"HTTP client error: {e}")
            raise TransportError(request.method, url, str(e)) from e

        if response.status >= 400:
            text = raw.decode("utf-8", errors="replace")
            raise RemoteError.from_status(
                response.status,
                _error_message(response.status, text),
                {"method": request.method, "path": request.path},
            )

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(
                f"Response to {request.method} {request.path} is not valid UTF-8: {e}"
            ) from e

        if not text.strip():
            return None

        try:
            data = json.loads(text)
        except ValueError as e:
            raise DecodeError(
                f"Invalid JSON in response to {request.method} {request.path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected a JSON object in response to {request.method} "
                f"{request.path}, got {type(data).__name__}"
            )

        return data

    async def close(self):
        """Close the HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
