"""
Requests Transport Implementation

Concrete HttpTransportInterface on top of a requests.Session.
"""

import logging
from typing import Optional

import requests

from config.settings import STREAM_HTTP_TIMEOUT
from cfstream.interfaces.transport_interface import (
    HttpRequest,
    HttpResponse,
    HttpTransportInterface,
)
from cfstream.models.failure import TransportFailure
from cfstream.utils.error_utils import transport_error


class RequestsTransport(HttpTransportInterface):
    """
    HTTP transport backed by requests.

    One pooled session per client instance. Answered requests are
    returned whatever their status; only connection failures raise.
    """

    def __init__(
        self,
        timeout: float = STREAM_HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize requests transport.

        Args:
            timeout: Per-request timeout in seconds
            session: Existing session to use (default: a new one)
        """
        self.logger = logging.getLogger(__name__)
        self.timeout = timeout
        self._session = session or requests.Session()

    def send(self, request: HttpRequest) -> HttpResponse:
        self.logger.debug(f"{request.method} {request.url}")

        try:
            response = self._session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            failure = self._failure_from_exception(e)
            self.logger.error(f"{request.method} {request.url} failed: {e}")
            raise transport_error(failure) from e

        self.logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return HttpResponse(status=response.status_code, text=response.text)

    def _failure_from_exception(self, error: requests.RequestException) -> TransportFailure:
        response = error.response
        if response is None:
            return TransportFailure(message=str(error))
        return TransportFailure(
            status=response.status_code,
            response_text=response.text,
            reason=response.reason,
            message=str(error),
        )

    def close(self) -> None:
        self._session.close()
