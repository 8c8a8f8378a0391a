"""
Mock Transport Implementation

In-memory HTTP transport for testing without the Cloudflare API.
Similar to MockUploadEngine: responses are scripted, requests recorded.
"""

import json
import logging
import threading
from collections import deque
from typing import Any, Deque, List, Optional, Union
from uuid import uuid4

from cfstream.interfaces.transport_interface import (
    HttpRequest,
    HttpResponse,
    HttpTransportInterface,
)
from cfstream.models.failure import TransportFailure
from cfstream.utils.error_utils import transport_error


class MockTransport(HttpTransportInterface):
    """
    Mock HTTP transport.

    Queued responses are returned in order; once the queue is empty a
    successful fake video record is returned. Useful for:
    - Unit tests
    - Development without Cloudflare credentials

    Example:
        transport = MockTransport()
        transport.queue_json({"result": {"uid": "abc"}, "errors": []})
        transport.queue_failure(TransportFailure(status=403))
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._queue: Deque[Union[HttpResponse, TransportFailure]] = deque()

        # Track requests for testing
        self.requests: List[HttpRequest] = []
        self.closed = False

    def queue_response(self, text: str, status: int = 200) -> None:
        """Queue a raw text response"""
        with self._lock:
            self._queue.append(HttpResponse(status=status, text=text))

    def queue_json(self, payload: Any, status: int = 200) -> None:
        """Queue a JSON response"""
        self.queue_response(json.dumps(payload), status=status)

    def queue_failure(self, failure: TransportFailure) -> None:
        """Queue a connection-level failure"""
        with self._lock:
            self._queue.append(failure)

    def send(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
            scripted = self._queue.popleft() if self._queue else None

        self.logger.debug(f"[MOCK] {request.method} {request.url}")

        if isinstance(scripted, TransportFailure):
            raise transport_error(scripted)
        if scripted is not None:
            return scripted
        return self._default_response(request)

    def _default_response(self, request: HttpRequest) -> HttpResponse:
        record = {"uid": f"mock_{uuid4().hex}", "readyToStream": False}
        return HttpResponse(
            status=200,
            text=json.dumps({"success": True, "errors": [], "result": record}),
        )

    def get_last_request(self) -> Optional[HttpRequest]:
        """Get most recent request (or None)"""
        with self._lock:
            return self.requests[-1] if self.requests else None

    def close(self) -> None:
        self.closed = True
