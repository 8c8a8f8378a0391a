"""
Utilities Package

Helpers shared by the Stream controllers and implementations.
"""

from cfstream.utils.error_utils import describe_failure, transport_error
from cfstream.utils.hook_utils import as_observers, notify
from cfstream.utils.logging_utils import setup_logging

__all__ = [
    "as_observers",
    "describe_failure",
    "notify",
    "setup_logging",
    "transport_error",
]
