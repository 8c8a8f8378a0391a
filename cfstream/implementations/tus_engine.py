"""
Tus Upload Engine Implementation

Concrete UploadEngineInterface backed by the tuspy client (tusclient).
tuspy does the protocol work (creation, PATCH chunks, retries); this
module runs its chunk loop on a worker thread and reports the outcome
through the session callbacks.
"""

import io
import logging
import threading
from typing import Optional

from tusclient import client as tus_client
from tusclient.exceptions import TusCommunicationError

from config.settings import STREAM_UPLOAD_RETRIES, STREAM_UPLOAD_RETRY_DELAY
from cfstream.interfaces.upload_engine_interface import (
    ErrorCallback,
    ProgressCallback,
    SuccessCallback,
    UploadEngineInterface,
    UploadSessionConfig,
    UploadSessionInterface,
)
from cfstream.models.failure import TransportFailure


class TusUploadSession(UploadSessionInterface):
    """
    One tus upload running on its own worker thread.

    The underlying tuspy Uploader is available as `uploader` for
    introspection (offset, url).
    """

    def __init__(
        self,
        uploader,
        on_error: ErrorCallback,
        on_progress: ProgressCallback,
        on_success: SuccessCallback,
    ):
        self.logger = logging.getLogger(__name__)
        self.uploader = uploader
        self._on_error = on_error
        self._on_progress = on_progress
        self._on_success = on_success
        self._worker_thread: Optional[threading.Thread] = None

    @property
    def url(self) -> Optional[str]:
        return self.uploader.url

    def start(self) -> None:
        if self._worker_thread is not None:
            self.logger.warning("Upload session already started")
            return

        # Not a daemon: an upload in flight keeps the process alive
        self._worker_thread = threading.Thread(
            target=self._run,
            name="TusUpload-Worker",
        )
        self._worker_thread.start()

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for the worker thread to finish (tests and scripts)"""
        if self._worker_thread is not None:
            self._worker_thread.join(timeout)

    def _run(self) -> None:
        try:
            total = self.uploader.get_file_size()
            self.uploader.stop_at = total

            # Creation request, also needed for empty payloads
            if not self.uploader.url:
                self.uploader.set_url(self.uploader.create_url())
                self.uploader.offset = 0
                self.logger.debug(f"Created tus upload: {self.uploader.url}")

            while self.uploader.offset < total:
                self.uploader.upload_chunk()
                self._on_progress(self.uploader.offset, total)

        except TusCommunicationError as e:
            self.logger.error(f"tus upload failed: {e}")
            self._on_error(self._failure_from_exception(e))
            return
        except Exception as e:
            # The session must always report an outcome
            self.logger.error(f"Unexpected tus upload error: {e}", exc_info=True)
            self._on_error(TransportFailure(message=str(e)))
            return

        self._on_success()

    def _failure_from_exception(self, error: TusCommunicationError) -> TransportFailure:
        content = error.response_content
        if isinstance(content, bytes):
            content = content.decode("utf-8", errors="replace")

        return TransportFailure(
            status=error.status_code,
            response_text=content or None,
            reason=str(error) if error.status_code is None else None,
            message=str(error),
        )


class TusUploadEngine(UploadEngineInterface):
    """
    Resumable upload engine using tuspy.

    Every session gets its own TusClient with the headers from its
    UploadSessionConfig; nothing is shared between sessions.
    """

    def __init__(
        self,
        retries: int = STREAM_UPLOAD_RETRIES,
        retry_delay: int = STREAM_UPLOAD_RETRY_DELAY,
    ):
        """
        Initialize tus engine.

        Args:
            retries: Retries per failed chunk (done by tuspy)
            retry_delay: Seconds between chunk retries
        """
        self.logger = logging.getLogger(__name__)
        self.retries = retries
        self.retry_delay = retry_delay

    def create_session(
        self,
        data: bytes,
        config: UploadSessionConfig,
        on_error: ErrorCallback,
        on_progress: ProgressCallback,
        on_success: SuccessCallback,
    ) -> TusUploadSession:
        client = tus_client.TusClient(config.endpoint, headers=dict(config.headers))
        uploader = client.uploader(
            file_stream=io.BytesIO(data),
            chunk_size=config.chunk_size,
            metadata=dict(config.metadata),
            retries=self.retries,
            retry_delay=self.retry_delay,
        )

        self.logger.debug(
            f"tus session prepared: {len(data)} bytes, "
            f"chunk size {config.chunk_size}",
        )
        return TusUploadSession(uploader, on_error, on_progress, on_success)
