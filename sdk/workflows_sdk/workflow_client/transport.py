"""HTTP transport for the workflows API built on httpx."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Final, Mapping, Optional

import httpx
from pydantic import BaseModel

from .errors import RequestTimeoutError, TransportError
from .schemas import JsonResponse

if TYPE_CHECKING:
    from .protocol import TransportProtocol

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT: Final[str] = "workflows-sdk-python"


def encode_body(body: Any) -> Any:
    """Convert a request body into JSON-compatible data.

    Models are dumped by alias with fields the caller never set left out, so
    an explicit None still reaches the backend. Mappings are sent as given.
    """
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(body, Mapping):
        return dict(body)
    return body


class HttpxTransport:
    """Asynchronous transport that sends JSON requests with httpx."""

    def __init__(
        self,
        timeout: float = 30.0,
        *,
        api_key: Optional[str] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._timeout: Final[float] = timeout
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None
        self._headers = self._build_headers(api_key, user_agent)

    @staticmethod
    def _build_headers(api_key: Optional[str], user_agent: str) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": user_agent,
        }
        if api_key:
            headers["Authorization"] = f"ApiKey {api_key}"
        return headers

    async def request(
        self,
        method: str,
        url: str,
        body: Any = None,
        *,
        timeout: Optional[float] = None,
    ) -> JsonResponse:
        """Send one request and decode its JSON response.

        Raises:
            RequestTimeoutError: If the deadline elapses.
            TransportError: On network failures, error statuses or bad JSON.
        """
        payload = encode_body(body)
        kwargs: Dict[str, Any] = {
            "headers": self._headers,
            "timeout": self._timeout if timeout is None else timeout,
        }
        if payload is not None:
            kwargs["json"] = payload

        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            logger.error("Request %s %s timed out: %s", method, url, exc)
            raise RequestTimeoutError(f"{method} {url} timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            logger.error("Request %s %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        try:
            decoded = response.json() if response.content else None
        except ValueError as exc:
            logger.error(
                "Invalid JSON in %s response from %s: %s",
                response.status_code,
                url,
                exc,
            )
            raise TransportError(
                f"{method} {url} returned a body that is not valid JSON",
                status_code=response.status_code,
            ) from exc

        result = JsonResponse(
            status_code=response.status_code,
            body=decoded,
            headers=dict(response.headers),
        )
        if response.is_error:
            logger.error(
                "Request %s %s returned status %s", method, url, response.status_code
            )
            raise TransportError(
                f"{method} {url} returned status {response.status_code}",
                status_code=response.status_code,
                response=result,
            )

        logger.debug("Request %s %s returned %s", method, url, response.status_code)
        return result

    async def aclose(self) -> None:
        """Close the underlying HTTP client when this instance owns it."""

        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()


if TYPE_CHECKING:
    # Static interface check to guarantee protocol compatibility during type checking
    _: TransportProtocol = HttpxTransport()
