"""
Transport Failure Model

Explicit description of a connection-level failure. Transports translate
their library exceptions into this shape so the error message can be
classified without inspecting foreign exception types.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TransportFailure:
    """
    What a transport knows about a failed request.

    Attributes:
        status: HTTP status of the failed request (None if no response)
        response_text: Raw body of the failed response (None if no response)
        reason: Plain-text failure reason (HTTP reason phrase, or the
            engine's description when no response was received)
        message: Generic message of the underlying exception
    """

    status: Optional[int] = None
    response_text: Optional[str] = None
    reason: Optional[str] = None
    message: str = ""
