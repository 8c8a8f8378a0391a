"""
Upload Controller

Wraps the resumable upload engine: resolves the input, derives the
metadata, starts a session and turns the engine's callbacks into one
settled Future plus the user's hooks.

Flow:
    input -> metadata -> engine session -> (engine success)
    -> fetch canonical video record -> on_success hooks -> resolve
"""

import logging
import threading
from concurrent.futures import Future
from typing import Any, Optional

from cfstream.constants import UPLOAD_CHUNK_SIZE
from cfstream.controllers.api_controller import ApiController
from cfstream.credentials import Credentials
from cfstream.exceptions import InputError, TransportError
from cfstream.interfaces.upload_engine_interface import (
    UploadEngineInterface,
    UploadSessionConfig,
    UploadSessionInterface,
)
from cfstream.models.failure import TransportFailure
from cfstream.models.options import UploadOptions, to_upload_input
from cfstream.utils.error_utils import transport_error
from cfstream.utils.hook_utils import as_observers, notify
from cfstream.utils.metadata_utils import derive_metadata, read_upload_input


class UploadJob:
    """
    Bridges one engine session to one Future.

    The Future settles exactly once; engine events arriving afterwards
    are ignored. At most one follow-up record fetch is made.
    """

    def __init__(self, result: "Future[Any]", options: UploadOptions, api: ApiController):
        self.logger = logging.getLogger(__name__)
        self.result = result
        self.session: Optional[UploadSessionInterface] = None
        self._api = api
        self._lock = threading.Lock()
        self._completed = False
        self._settled = False

        self._on_progress = as_observers(options.on_progress)
        self._on_success = as_observers(options.on_success)
        self._on_error = as_observers(options.on_error)

    # =========================================================================
    # ENGINE CALLBACKS
    # =========================================================================

    def on_engine_error(self, failure: TransportFailure) -> None:
        self._fail(transport_error(failure))

    def on_engine_progress(self, bytes_uploaded: int, bytes_total: int) -> None:
        with self._lock:
            if self._settled:
                return
        notify(self._on_progress, bytes_uploaded, bytes_total)

    def on_engine_success(self) -> None:
        with self._lock:
            if self._completed or self._settled:
                self.logger.debug("Ignoring repeated completion event")
                return
            self._completed = True

        url = self.session.url if self.session is not None else None
        if not url:
            self._fail(TransportError("upload finished without a session url"))
            return

        self.logger.debug(f"Upload complete, fetching video record: {url}")
        try:
            follow_up = self._api.request(url)
        except Exception as e:
            # e.g. the client was closed while the upload was in flight
            self._fail(e)
            return
        follow_up.add_done_callback(self._on_record)

    def _on_record(self, follow_up: "Future[Any]") -> None:
        error = follow_up.exception()
        if error is not None:
            self._fail(error)
        else:
            self._succeed(follow_up.result())

    # =========================================================================
    # SETTLEMENT
    # =========================================================================

    def _claim(self) -> bool:
        with self._lock:
            if self._settled:
                return False
            self._settled = True
            return True

    def _succeed(self, record: Any) -> None:
        if not self._claim():
            self.logger.debug("Upload already settled, dropping result")
            return

        self.logger.info("✅ Upload successful")
        notify(self._on_success, record)
        self.result.set_result(record)

    def _fail(self, error: BaseException) -> None:
        if not self._claim():
            self.logger.debug(f"Upload already settled, dropping error: {error}")
            return

        self.logger.error(f"❌ Upload failed: {error}")
        notify(self._on_error, error)
        self.result.set_exception(error)


class UploadController:
    """
    High-level upload coordinator.

    This class:
    - Accepts a file path or in-memory bytes
    - Derives tus metadata (name, type)
    - Starts a resumable session with per-session headers
    - Resolves with the canonical video record

    Usage:
        controller = UploadController(credentials, api, TusUploadEngine())
        record = controller.upload("/videos/clip.mp4").result()
    """

    def __init__(
        self,
        credentials: Credentials,
        api: ApiController,
        engine: UploadEngineInterface,
        chunk_size: int = UPLOAD_CHUNK_SIZE,
    ):
        """
        Initialize upload controller.

        Args:
            credentials: Validated credentials (endpoint and headers)
            api: Controller used to fetch the record after upload
            engine: Resumable upload engine
            chunk_size: Bytes per tus chunk
        """
        self.logger = logging.getLogger(__name__)
        self.credentials = credentials
        self.api = api
        self.engine = engine
        self.chunk_size = chunk_size

    def upload(self, file: Any = None, options: Optional[UploadOptions] = None) -> "Future[Any]":
        """
        Upload a video without blocking.

        Args:
            file: Path (str / PathLike), bytes, FilePath or InMemory
            options: Name, metadata and hooks

        Returns:
            Future resolving to the video record. When there is nothing to
            upload the Future is already failed with InputError and no
            network call is made.
        """
        options = options or UploadOptions()
        result: "Future[Any]" = Future()

        upload_input = to_upload_input(file)
        try:
            data = read_upload_input(upload_input)
        except InputError as e:
            self.logger.error(f"Upload rejected: {e}")
            result.set_exception(e)
            return result

        metadata = derive_metadata(upload_input, options.name, options.meta)
        config = UploadSessionConfig(
            endpoint=self.credentials.upload_endpoint,
            chunk_size=self.chunk_size,
            metadata=metadata,
            headers=self.credentials.identity_headers,
        )

        job = UploadJob(result, options, self.api)
        session = self.engine.create_session(
            data,
            config,
            on_error=job.on_engine_error,
            on_progress=job.on_engine_progress,
            on_success=job.on_engine_success,
        )
        job.session = session

        self.logger.info(
            f"Starting upload: {metadata.get('name', '<unnamed>')} ({len(data)} bytes)",
        )
        # on_start observes the session before any engine callback can fire
        notify(as_observers(options.on_start), session)
        session.start()
        return result
