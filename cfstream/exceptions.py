"""
Stream Exceptions

Error taxonomy for the Cloudflare Stream client.
None of these are retried by the client; they reach the caller either
raised directly (ConfigurationError) or as the exception of a failed Future.
"""

from typing import Any, List, Optional

from cfstream.models.failure import TransportFailure


class StreamError(Exception):
    """Base class for all Cloudflare Stream client errors"""


class ConfigurationError(StreamError):
    """
    Raised at construction time when credentials are incomplete.

    Fatal and not retryable: the client cannot be built without
    zone, email and key.
    """


class InputError(StreamError):
    """Raised when an upload has no readable content (no network call is made)"""


class ApiError(StreamError):
    """
    The API answered with a non-empty error list.

    Attributes:
        errors: The error list exactly as the server returned it
    """

    def __init__(self, errors: List[Any]):
        super().__init__(f"Cloudflare API error: {errors}")
        self.errors = errors


class TransportError(StreamError):
    """
    Connection-level failure of a REST call or a tus session.

    The message is the classified failure description
    (see cfstream.utils.error_utils.describe_failure).

    Attributes:
        failure: Structured description of what went wrong, if known
    """

    def __init__(self, message: str, failure: Optional[TransportFailure] = None):
        super().__init__(message)
        self.failure = failure
