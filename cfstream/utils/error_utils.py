"""
Error Classification Utilities

Turns a TransportFailure into the single message reported to the caller.
Used for REST transport failures and tus session failures alike.
"""

from cfstream.constants import FORBIDDEN_MESSAGE, GENERIC_FAILURE_MESSAGE
from cfstream.exceptions import TransportError
from cfstream.models.failure import TransportFailure

FORBIDDEN_STATUS = 403


def describe_failure(failure: TransportFailure) -> str:
    """
    Pick the message for a failed request, by priority.

    Priority:
        1. "invalid credentials" if the request was answered with 403
        2. The raw response text
        3. A plain-text failure reason
        4. The generic exception message

    Args:
        failure: What the transport knows about the failure

    Returns:
        Message for the caller (never empty)

    Example:
        describe_failure(TransportFailure(status=403, response_text="nope"))
        # Returns: "invalid credentials"
    """
    if failure.status == FORBIDDEN_STATUS:
        return FORBIDDEN_MESSAGE
    if failure.response_text:
        return failure.response_text
    if failure.reason:
        return failure.reason
    return failure.message or GENERIC_FAILURE_MESSAGE


def transport_error(failure: TransportFailure) -> TransportError:
    """Build the TransportError for a failure, message already classified"""
    return TransportError(describe_failure(failure), failure=failure)
