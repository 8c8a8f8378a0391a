"""
Mock Upload Engine Implementation

Simulated tus engine for testing without network access.
Sessions run synchronously inside start(), chunk by chunk.
"""

import logging
from typing import List, Optional
from uuid import uuid4

from cfstream.interfaces.upload_engine_interface import (
    ErrorCallback,
    ProgressCallback,
    SuccessCallback,
    UploadEngineInterface,
    UploadSessionConfig,
    UploadSessionInterface,
)
from cfstream.models.failure import TransportFailure


class MockUploadSession(UploadSessionInterface):
    """Upload session that "uploads" in memory"""

    def __init__(
        self,
        data: bytes,
        config: UploadSessionConfig,
        on_error: ErrorCallback,
        on_progress: ProgressCallback,
        on_success: SuccessCallback,
        failure: Optional[TransportFailure] = None,
    ):
        self.logger = logging.getLogger(__name__)
        self.data = data
        self.config = config
        self.failure = failure
        self.started = False
        self._url: Optional[str] = None
        self._on_error = on_error
        self._on_progress = on_progress
        self._on_success = on_success

    @property
    def url(self) -> Optional[str]:
        return self._url

    def start(self) -> None:
        self.started = True

        if self.failure is not None:
            self.logger.info("[MOCK] Simulating upload failure")
            self._on_error(self.failure)
            return

        self._url = f"{self.config.endpoint}/mock_{uuid4().hex}"

        total = len(self.data)
        offset = 0
        while offset < total:
            offset = min(offset + self.config.chunk_size, total)
            self._on_progress(offset, total)

        self.logger.info(f"[MOCK] Upload complete: {self._url} ({total} bytes)")
        self._on_success()


class MockUploadEngine(UploadEngineInterface):
    """
    Mock resumable upload engine.

    Example:
        # Always succeeds
        engine = MockUploadEngine()

        # Test error handling
        engine = MockUploadEngine(failure=TransportFailure(status=403))
    """

    def __init__(self, failure: Optional[TransportFailure] = None):
        """
        Initialize mock engine.

        Args:
            failure: If set, every session fails with it instead of uploading
        """
        self.logger = logging.getLogger(__name__)
        self.failure = failure

        # Track sessions for testing
        self.sessions: List[MockUploadSession] = []

        self.logger.info(f"Mock Upload Engine initialized (failing: {failure is not None})")

    def create_session(
        self,
        data: bytes,
        config: UploadSessionConfig,
        on_error: ErrorCallback,
        on_progress: ProgressCallback,
        on_success: SuccessCallback,
    ) -> MockUploadSession:
        session = MockUploadSession(
            data,
            config,
            on_error,
            on_progress,
            on_success,
            failure=self.failure,
        )
        self.sessions.append(session)
        return session

    def get_last_session(self) -> Optional[MockUploadSession]:
        """Get most recent session (or None)"""
        return self.sessions[-1] if self.sessions else None
