"""
HTTP Transport Interface

Abstract interface for the blocking HTTP layer under the REST client.
The API controller depends on this abstraction, not on requests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional, Union


@dataclass
class HttpRequest:
    """
    A fully-resolved HTTP request.

    Attributes:
        method: HTTP verb
        url: Absolute URL
        headers: Final headers (identity headers included)
        payload: Body, or None for no body
    """

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    payload: Optional[Union[bytes, str]] = None


@dataclass
class HttpResponse:
    """
    Raw HTTP response.

    Attributes:
        status: HTTP status code
        text: Decoded body text (may be JSON, HTML, or anything else)
    """

    status: int
    text: str = ""


class HttpTransportInterface(ABC):
    """
    Abstract base class for HTTP transports.

    Implementations must NOT raise for 4xx/5xx answers: any answered
    request is returned as an HttpResponse. Only connection-level
    failures raise.
    """

    @abstractmethod
    def send(self, request: HttpRequest) -> HttpResponse:
        """
        Perform a request (blocking).

        Args:
            request: Request to send

        Returns:
            The server's response, whatever its status

        Raises:
            TransportError: If no response could be obtained
        """

    @abstractmethod
    def close(self) -> None:
        """Release connections held by the transport"""
