"""
Models Package

Value objects passed between the client, its controllers and transports.
"""

from cfstream.models.failure import TransportFailure
from cfstream.models.options import (
    FilePath,
    InMemory,
    RequestOptions,
    UploadInput,
    UploadOptions,
)

__all__ = [
    "FilePath",
    "InMemory",
    "RequestOptions",
    "TransportFailure",
    "UploadInput",
    "UploadOptions",
]
