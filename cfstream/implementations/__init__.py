"""
Implementations Package

Concrete transports and upload engines.
"""

from cfstream.implementations.mock_engine import MockUploadEngine, MockUploadSession
from cfstream.implementations.mock_transport import MockTransport
from cfstream.implementations.requests_transport import RequestsTransport
from cfstream.implementations.tus_engine import TusUploadEngine, TusUploadSession

__all__ = [
    "MockTransport",
    "MockUploadEngine",
    "MockUploadSession",
    "RequestsTransport",
    "TusUploadEngine",
    "TusUploadSession",
]
