"""Base API client with the request dispatcher shared by every endpoint."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx
from pydantic import BaseModel

from tasty_client.codec import (
    decode_error,
    decode_result,
    encode_body,
    encode_query,
    is_error_status,
)
from tasty_client.exceptions import ClientSideError, InvalidSessionError, TastyError

if TYPE_CHECKING:
    from tasty_client.auth import Session
    from tasty_client.config import TastyConfig

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

UrlBuilder = Callable[[str], httpx.URL | str]


@dataclass(frozen=True, slots=True)
class Exchange(Generic[T]):
    """Outcome of one HTTP exchange.

    ``response`` is set whenever the server answered, including when
    ``error`` is set, so callers can always inspect status and headers.
    ``data`` is only set when a result type was requested and decoded.
    """

    response: httpx.Response | None = None
    data: T | None = None
    error: TastyError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status_code(self) -> int:
        return self.response.status_code if self.response is not None else 0

    def unwrap(self) -> T | None:
        """Return the decoded data, raising the error if there is one."""
        if self.error is not None:
            raise self.error
        return self.data


class BaseAPI:
    """Base class for tastytrade API endpoints.

    Provides the dispatcher that builds, sends and interprets every request.
    The dispatcher never raises: failures come back on the ``Exchange``.
    Endpoint helpers (``_get``, ``_post``...) unwrap it and raise the typed
    error instead.
    """

    def __init__(
        self,
        config: TastyConfig,
        session: Session,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self.session = session
        self._http_client = http_client

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client

    def _join_url(self, path: str) -> str:
        """Base URL plus path."""
        return f"{self.config.base_url}{path}"

    def _opaque_url(self, path: str) -> httpx.URL:
        """URL on the base host whose path is used exactly as given.

        Percent-escapes in ``path`` are sent as-is, so an escaped ``/``
        inside an identifier (``BRK%2FB``) is not read as a path separator.
        """
        scheme = self.config.base_url.split(":", 1)[0]
        return httpx.URL(
            scheme=scheme,
            netloc=self.config.base_host.encode("ascii"),
            raw_path=path.encode("ascii"),
        )

    async def _send(
        self,
        method: str,
        url: httpx.URL | str,
        **kwargs: Any,
    ) -> httpx.Response:
        if self._http_client is not None:
            # Use shared connection pool
            return await self._http_client.request(method, url, **kwargs)

        # Fallback: create per-request client (no pooling)
        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            return await client.request(method, url, **kwargs)

    async def _dispatch(
        self,
        method: str,
        path: str,
        *,
        params: BaseModel | Mapping[str, Any] | None = None,
        json_body: Any = None,
        result: type[T] | None = None,
        authenticated: bool = True,
        url_builder: UrlBuilder | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Exchange[T]:
        """Perform exactly one HTTP exchange.

        Args:
            method: HTTP method
            path: API path (e.g., "/customers/me")
            params: Query object, encoded with ``encode_query``
            json_body: Request body, encoded with ``encode_body``
            result: Model to decode a successful response into
            authenticated: Require and attach the session token
            url_builder: Turns ``path`` into the request URL (default: base URL + path)
            headers: Extra headers; the content type is added to them

        Returns:
            Exchange with the raw response, the decoded data and/or the error
        """
        try:
            request_headers = httpx.Headers(headers)
            if authenticated:
                request_headers.update(self.session.auth_headers())
        except InvalidSessionError as e:
            return Exchange(error=e)
        except (UnicodeEncodeError, TypeError, ValueError) as e:
            # header names and values must be ASCII
            return Exchange(error=ClientSideError(e))

        content: bytes | None = None
        if json_body is not None:
            try:
                content = encode_body(json_body)
            except ClientSideError as e:
                return Exchange(error=e)

        build_url = url_builder or self._join_url
        try:
            url = build_url(path)
            query = encode_query(params) if params is not None else None
        except ClientSideError as e:
            return Exchange(error=e)
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            return Exchange(error=ClientSideError(e))

        request_headers["Content-Type"] = "application/json"
        request_headers["Accept"] = "application/json"

        logger.debug("Request: %s %s", method, url)
        logger.debug("Params: %s", query)

        try:
            response = await self._send(
                method,
                url,
                params=query or None,
                content=content,
                headers=request_headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("Transport failure for %s %s: %s", method, url, e)
            return Exchange(error=ClientSideError(e))

        status = response.status_code
        logger.debug("Response: %s %s -> %s", method, url, status)

        if status == httpx.codes.NO_CONTENT:
            return Exchange(response=response)

        if is_error_status(status):
            error = decode_error(response)
            logger.debug("API error %s: %s (%s)", status, error.code, error.message)
            return Exchange(response=response, error=error)

        if result is None:
            return Exchange(response=response)

        try:
            data = decode_result(response.content, result)
        except ClientSideError as e:
            logger.debug("Failed to decode %s response: %s", result.__name__, e.message)
            return Exchange(response=response, error=e)
        return Exchange(response=response, data=data)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: BaseModel | Mapping[str, Any] | None = None,
        json_body: Any = None,
        result: type[T] | None = None,
    ) -> Exchange[T]:
        """Authenticated request against the base URL."""
        return await self._dispatch(
            method, path, params=params, json_body=json_body, result=result
        )

    async def _custom_request(
        self,
        method: str,
        path: str,
        *,
        params: BaseModel | Mapping[str, Any] | None = None,
        json_body: Any = None,
        result: type[T] | None = None,
    ) -> Exchange[T]:
        """Authenticated request whose path is sent verbatim to the base host."""
        return await self._dispatch(
            method,
            path,
            params=params,
            json_body=json_body,
            result=result,
            url_builder=self._opaque_url,
        )

    async def _no_auth_request(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: BaseModel | Mapping[str, Any] | None = None,
        json_body: Any = None,
        result: type[T] | None = None,
    ) -> Exchange[T]:
        """Request that does not need a session, e.g. login."""
        return await self._dispatch(
            method,
            path,
            params=params,
            json_body=json_body,
            result=result,
            authenticated=False,
            headers=headers,
        )

    @staticmethod
    def _expect(exchange: Exchange[T]) -> T:
        """Unwrap an exchange that must carry data."""
        data = exchange.unwrap()
        if data is None:
            raise ClientSideError(f"expected a response body, got HTTP {exchange.status_code}")
        return data

    async def _get(
        self,
        path: str,
        result: type[T],
        params: BaseModel | Mapping[str, Any] | None = None,
    ) -> T:
        """Make a GET request."""
        return self._expect(await self._request("GET", path, params=params, result=result))

    async def _post(
        self,
        path: str,
        result: type[T],
        json_body: Any = None,
    ) -> T:
        """Make a POST request."""
        return self._expect(
            await self._request("POST", path, json_body=json_body, result=result)
        )

    async def _put(self, path: str, result: type[T], json_body: Any) -> T:
        """Make a PUT request."""
        return self._expect(await self._request("PUT", path, json_body=json_body, result=result))

    async def _patch(self, path: str, result: type[T], json_body: Any) -> T:
        """Make a PATCH request."""
        return self._expect(
            await self._request("PATCH", path, json_body=json_body, result=result)
        )

    async def _delete(self, path: str, result: type[T]) -> T:
        """Make a DELETE request."""
        return self._expect(await self._request("DELETE", path, result=result))
