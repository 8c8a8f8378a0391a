"""
Interfaces Package

Abstract interfaces for the HTTP transport and the resumable upload engine.
"""

from cfstream.interfaces.transport_interface import (
    HttpRequest,
    HttpResponse,
    HttpTransportInterface,
)
from cfstream.interfaces.upload_engine_interface import (
    UploadEngineInterface,
    UploadSessionConfig,
    UploadSessionInterface,
)

__all__ = [
    "HttpRequest",
    "HttpResponse",
    "HttpTransportInterface",
    "UploadEngineInterface",
    "UploadSessionConfig",
    "UploadSessionInterface",
]
