"""Mock implementation of the workflow transport for local testing."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Deque, Dict, Iterable, List, Optional

from .schemas import JsonResponse
from .transport import encode_body

if TYPE_CHECKING:
    from .protocol import TransportProtocol


class MockWorkflowTransport:
    """In-memory transport that records requests and replays canned responses."""

    def __init__(
        self,
        responses: Optional[Iterable[JsonResponse]] = None,
        *,
        error: Optional[BaseException] = None,
    ) -> None:
        self.call_history: List[Dict[str, Any]] = []
        self.error = error
        self._responses: Deque[JsonResponse] = deque(responses or [])

    def queue_response(self, response: JsonResponse) -> None:
        """Append a response to be returned by a later call."""
        self._responses.append(response)

    async def request(
        self,
        method: str,
        url: str,
        body: Any = None,
        *,
        timeout: Optional[float] = None,
    ) -> JsonResponse:
        """Store the call arguments and return the next canned response."""

        self.call_history.append(
            {
                "method": method,
                "url": url,
                "body": encode_body(body),
                "timeout": timeout,
            }
        )
        if self.error is not None:
            raise self.error
        if self._responses:
            return self._responses.popleft()
        return JsonResponse(status_code=200, body={"data": {}})


if TYPE_CHECKING:
    # Interface check for static type analysis
    _: TransportProtocol = MockWorkflowTransport()
