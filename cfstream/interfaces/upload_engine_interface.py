"""
Upload Engine Interface

Abstract interface for the external resumable (tus) upload engine.
The engine owns chunking, retry and resumption; the upload controller
only sees a session with a start() operation and three callbacks.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from cfstream.models.failure import TransportFailure

# Callbacks the engine fires from its own thread
ErrorCallback = Callable[[TransportFailure], None]
ProgressCallback = Callable[[int, int], None]
SuccessCallback = Callable[[], None]


@dataclass
class UploadSessionConfig:
    """
    Per-session engine configuration.

    Passed explicitly to every session; there are no engine-wide defaults.

    Attributes:
        endpoint: tus creation endpoint
        chunk_size: Bytes per PATCH request
        metadata: tus Upload-Metadata values
        headers: Headers sent with every tus request
    """

    endpoint: str
    chunk_size: int
    metadata: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)


class UploadSessionInterface(ABC):
    """
    Handle on one resumable upload.

    Handed to the user's on_start hook for introspection.
    """

    @property
    @abstractmethod
    def url(self) -> Optional[str]:
        """Resumable upload URL (None until the server created it)"""

    @abstractmethod
    def start(self) -> None:
        """
        Begin uploading without blocking the caller.

        Exactly one of on_success / on_error is fired when the
        upload ends; on_progress may fire any number of times before.
        """


class UploadEngineInterface(ABC):
    """Abstract base class for resumable upload engines"""

    @abstractmethod
    def create_session(
        self,
        data: bytes,
        config: UploadSessionConfig,
        on_error: ErrorCallback,
        on_progress: ProgressCallback,
        on_success: SuccessCallback,
    ) -> UploadSessionInterface:
        """
        Prepare (but do not start) an upload session.

        Args:
            data: Content to upload
            config: Endpoint, chunk size, metadata and headers
            on_error: Fired with the failure if the upload fails
            on_progress: Fired with (bytes_uploaded, bytes_total)
            on_success: Fired once all bytes are acknowledged

        Returns:
            Session handle
        """
