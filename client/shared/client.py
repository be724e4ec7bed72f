"""
HTTP transport for the WalkMate backend.

A thin wrapper around httpx.AsyncClient. Every call goes to
base_url + path with a JSON content type and, when the session holds a
token, a bearer Authorization header. 2xx bodies are validated as response
envelopes and returned as-is; interpreting the envelope is the domain
modules' job.

Nothing here retries or backs off. Identical concurrent GETs share a single
request while it is in flight.
"""

import asyncio
import hashlib
import json
import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from .config import get_settings
from .exceptions import HTTPStatusError, InvalidResponseError
from .models import Envelope
from .session import Credentials, Session, get_session


logger = logging.getLogger(__name__)


class ApiClient:
    """
    Async client for the WalkMate REST backend.

    The session is injected rather than read from a global, and is read
    exactly once per request.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[Session] = None,
        timeout: Optional[float] = None,
        dedupe_reads: Optional[bool] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._session = session or get_session()
        self._dedupe_reads = (
            settings.dedupe_inflight_reads if dedupe_reads is None else dedupe_reads
        )
        self._http = httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )
        self._inflight: dict[str, asyncio.Future[Envelope]] = {}

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> Session:
        return self._session

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Envelope:
        """
        Issue one request and return the parsed response envelope.

        Args:
            path: Already-interpolated endpoint path, query string included
            method: HTTP method
            body: JSON-serializable body; None sends no body
            headers: Header overrides

        Returns:
            The response envelope, unvalidated beyond its shape

        Raises:
            HTTPStatusError: On a non-2xx status
            InvalidResponseError: If a 2xx body is not a JSON envelope
            httpx.TransportError: On network failure (unwrapped)
        """
        method = method.upper()
        credentials = self._session.snapshot()
        content = (
            json.dumps(body, ensure_ascii=False).encode("utf-8")
            if body is not None
            else None
        )

        request_headers = {"Content-Type": "application/json", **(headers or {})}
        if credentials.authorization:
            request_headers["Authorization"] = credentials.authorization

        if method != "GET" or not self._dedupe_reads:
            return await self._send(method, path, content, request_headers)

        key = self._fingerprint(method, path, content, credentials, headers)
        shared = self._inflight.get(key)
        if shared is None:
            shared = asyncio.ensure_future(
                self._send(method, path, content, request_headers)
            )
            self._inflight[key] = shared
            shared.add_done_callback(lambda done, key=key: self._forget(key, done))
        else:
            logger.debug(f"Joining in-flight request: {method} {path}")

        # A cancelled caller must not cancel the request other callers share
        return await asyncio.shield(shared)

    async def get(self, path: str, headers: Optional[dict[str, str]] = None) -> Envelope:
        return await self.request(path, "GET", headers=headers)

    async def post(
        self,
        path: str,
        body: Any = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Envelope:
        return await self.request(path, "POST", body=body, headers=headers)

    async def put(
        self,
        path: str,
        body: Any = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Envelope:
        return await self.request(path, "PUT", body=body, headers=headers)

    async def delete(self, path: str, headers: Optional[dict[str, str]] = None) -> Envelope:
        return await self.request(path, "DELETE", headers=headers)

    @property
    def inflight_count(self) -> int:
        """Number of shared reads currently in flight."""
        return len(self._inflight)

    async def _send(
        self,
        method: str,
        path: str,
        content: Optional[bytes],
        headers: dict[str, str],
    ) -> Envelope:
        url = f"{self._base_url}{path}"
        logger.debug(
            f"API request: {method} {url} "
            f"({'with' if 'Authorization' in headers else 'without'} token)"
        )

        try:
            response = await self._http.request(
                method, url, content=content, headers=headers
            )
        except httpx.TransportError as e:
            logger.warning(f"API request failed: {method} {path}: {e!r}")
            raise

        logger.debug(f"API response status: {response.status_code} {path}")

        if not response.is_success:
            logger.warning(f"API error status {response.status_code}: {method} {path}")
            raise HTTPStatusError(response.status_code, path)

        try:
            payload = response.json()
        except ValueError:
            logger.warning(f"API response body is not JSON: {method} {path}")
            raise InvalidResponseError("Response body is not valid JSON", path)

        try:
            return Envelope.model_validate(payload)
        except PydanticValidationError as e:
            logger.warning(f"API response is not an envelope: {method} {path}")
            raise InvalidResponseError(
                f"Response body is not a response envelope: {e.error_count()} error(s)",
                path,
            )

    @staticmethod
    def _fingerprint(
        method: str,
        path: str,
        content: Optional[bytes],
        credentials: Credentials,
        headers: Optional[dict[str, str]] = None,
    ) -> str:
        body_hash = hashlib.sha256(content or b"").hexdigest()
        overrides = sorted((name.lower(), value) for name, value in (headers or {}).items())
        return f"{method} {path} {body_hash} {credentials.generation} {overrides!r}"

    def _forget(self, key: str, done: "asyncio.Future[Envelope]") -> None:
        if self._inflight.get(key) is done:
            del self._inflight[key]
        # Mark the outcome as retrieved even if every waiter was cancelled
        if not done.cancelled():
            done.exception()


# Module-level instance getter
_client_instance: Optional[ApiClient] = None


def get_api_client() -> ApiClient:
    """Get the API client singleton bound to the default session."""
    global _client_instance
    if _client_instance is None:
        _client_instance = ApiClient()
    return _client_instance


def reset_api_client() -> None:
    """Reset the API client singleton (for testing)."""
    global _client_instance
    _client_instance = None
