"""
Cloudflare Stream Module

Client for the Cloudflare Stream video API with resumable (tus) uploads.

Public API:
    - CloudflareStream: REST + upload convenience object
    - create_client: Factory function
    - RequestOptions / UploadOptions: Per-call options
    - StreamError and subclasses: Error taxonomy

Usage:
    from cfstream import create_client, UploadOptions

    stream = create_client({"zone": "...", "email": "...", "key": "..."})
    record = stream.upload(
        "/path/to/video.mp4",
        UploadOptions(on_progress=lambda done, total: print(done, total)),
    ).result()
"""

from cfstream.client import CloudflareStream
from cfstream.credentials import Credentials
from cfstream.exceptions import (
    ApiError,
    ConfigurationError,
    InputError,
    StreamError,
    TransportError,
)
from cfstream.factory import StreamClientFactory, create_client
from cfstream.models.options import FilePath, InMemory, RequestOptions, UploadOptions

__version__ = "1.0.0"

# Public API
__all__ = [
    "ApiError",
    "CloudflareStream",
    "ConfigurationError",
    "Credentials",
    "FilePath",
    "InMemory",
    "InputError",
    "RequestOptions",
    "StreamClientFactory",
    "StreamError",
    "TransportError",
    "UploadOptions",
    "create_client",
]
