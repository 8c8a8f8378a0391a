"""
Upload Controller Tests

Tests cover:
1. Successful upload: one follow-up fetch, on_success, resolved Future
2. Engine failure and follow-up failure: on_error, failed Future
3. Input errors without any network attempt
4. Hooks: on_start handle, progress forwarding, fan-out, failing hooks
5. Session configuration (endpoint, chunk size, headers, metadata)
"""

from unittest.mock import MagicMock

import pytest

from cfstream.controllers.upload_controller import UploadController
from cfstream.exceptions import ApiError, InputError, TransportError
from cfstream.implementations.mock_engine import MockUploadEngine
from cfstream.interfaces.upload_engine_interface import (
    UploadEngineInterface,
    UploadSessionInterface,
)
from cfstream.models.failure import TransportFailure
from cfstream.models.options import UploadOptions

TIMEOUT = 5

RECORD_RESPONSE = {"success": True, "errors": [], "result": {"uid": "abc", "readyToStream": False}}


class RepeatingSession(UploadSessionInterface):
    """Misbehaving session that reports completion twice"""

    def __init__(self, on_error, on_success):
        self.on_error = on_error
        self._on_success = on_success

    @property
    def url(self):
        return "https://api.cloudflare.com/client/v4/zones/z/media/abc"

    def start(self):
        self._on_success()
        self._on_success()


class RepeatingEngine(UploadEngineInterface):
    def __init__(self):
        self.session = None

    def create_session(self, data, config, on_error, on_progress, on_success):
        self.session = RepeatingSession(on_error, on_success)
        return self.session


class LateProgressSession(UploadSessionInterface):
    """Misbehaving session that reports progress after failing"""

    def __init__(self, on_error, on_progress):
        self._on_error = on_error
        self._on_progress = on_progress

    @property
    def url(self):
        return None

    def start(self):
        self._on_error(TransportFailure(status=500, response_text="tus error"))
        self._on_progress(4, 4)


class LateProgressEngine(UploadEngineInterface):
    def create_session(self, data, config, on_error, on_progress, on_success):
        return LateProgressSession(on_error, on_progress)


# =============================================================================
# SUCCESS TESTS
# =============================================================================


class TestUploadSuccess:
    """Test the successful upload flow"""

    def test_resolves_with_video_record(self, uploads, mock_transport, temp_video_file):
        mock_transport.queue_json(RECORD_RESPONSE)

        record = uploads.upload(str(temp_video_file)).result(timeout=TIMEOUT)

        assert record == {"uid": "abc", "readyToStream": False}

    def test_exactly_one_follow_up_fetch(
        self, uploads, mock_transport, mock_engine, temp_video_file
    ):
        uploads.upload(str(temp_video_file)).result(timeout=TIMEOUT)

        assert len(mock_transport.requests) == 1
        assert mock_transport.requests[0].url == mock_engine.get_last_session().url

    def test_on_success_called_once(self, uploads, mock_transport, temp_video_file):
        mock_transport.queue_json(RECORD_RESPONSE)
        on_success = MagicMock()
        on_error = MagicMock()

        uploads.upload(
            str(temp_video_file),
            UploadOptions(on_success=on_success, on_error=on_error),
        ).result(timeout=TIMEOUT)

        on_success.assert_called_once_with({"uid": "abc", "readyToStream": False})
        on_error.assert_not_called()

    def test_in_memory_upload(self, uploads, mock_engine):
        uploads.upload(b"video bytes").result(timeout=TIMEOUT)

        session = mock_engine.get_last_session()
        assert session.data == b"video bytes"
        assert "name" not in session.config.metadata


# =============================================================================
# FAILURE TESTS
# =============================================================================


class TestUploadFailure:
    """Test engine and follow-up failures"""

    def test_engine_failure_rejects(self, credentials, api, mock_transport, temp_video_file):
        engine = MockUploadEngine(failure=TransportFailure(status=403, response_text="denied"))
        controller = UploadController(credentials, api, engine)
        on_error = MagicMock()
        on_success = MagicMock()

        future = controller.upload(
            str(temp_video_file),
            UploadOptions(on_error=on_error, on_success=on_success),
        )

        with pytest.raises(TransportError, match="^invalid credentials$"):
            future.result(timeout=TIMEOUT)

        on_error.assert_called_once()
        assert isinstance(on_error.call_args[0][0], TransportError)
        on_success.assert_not_called()
        assert mock_transport.requests == []

    def test_engine_failure_uses_response_text(self, credentials, api, temp_video_file):
        engine = MockUploadEngine(failure=TransportFailure(status=500, response_text="tus error"))
        controller = UploadController(credentials, api, engine)

        with pytest.raises(TransportError, match="tus error"):
            controller.upload(str(temp_video_file)).result(timeout=TIMEOUT)

    def test_follow_up_failure_rejects(self, uploads, mock_transport, temp_video_file):
        mock_transport.queue_json({"success": False, "errors": ["not found"]})
        on_error = MagicMock()
        on_success = MagicMock()

        future = uploads.upload(
            str(temp_video_file),
            UploadOptions(on_error=on_error, on_success=on_success),
        )

        with pytest.raises(ApiError):
            future.result(timeout=TIMEOUT)

        on_error.assert_called_once()
        assert on_error.call_args[0][0].errors == ["not found"]
        on_success.assert_not_called()

    def test_repeated_engine_events_settle_once(self, credentials, api, mock_transport):
        engine = RepeatingEngine()
        controller = UploadController(credentials, api, engine)
        mock_transport.queue_json(RECORD_RESPONSE)
        on_error = MagicMock()
        on_success = MagicMock()

        future = controller.upload(
            b"data", UploadOptions(on_error=on_error, on_success=on_success)
        )
        record = future.result(timeout=TIMEOUT)

        # A late error after settlement is ignored
        engine.session.on_error(TransportFailure(message="late failure"))

        assert record == {"uid": "abc", "readyToStream": False}
        assert len(mock_transport.requests) == 1
        on_success.assert_called_once()
        on_error.assert_not_called()


# =============================================================================
# INPUT TESTS
# =============================================================================


class TestUploadInput:
    """Test input errors (no network attempt)"""

    def test_no_input_fails_immediately(self, uploads, mock_transport, mock_engine):
        future = uploads.upload()

        assert future.done()
        assert isinstance(future.exception(), InputError)
        assert mock_engine.sessions == []
        assert mock_transport.requests == []

    def test_missing_file_fails_immediately(self, uploads, mock_engine, tmp_path):
        future = uploads.upload(str(tmp_path / "missing.mp4"))

        assert future.done()
        assert isinstance(future.exception(), InputError)
        assert mock_engine.sessions == []

    def test_input_error_does_not_fire_hooks(self, uploads):
        on_error = MagicMock()

        uploads.upload(None, UploadOptions(on_error=on_error))

        on_error.assert_not_called()


# =============================================================================
# HOOK TESTS
# =============================================================================


class TestUploadHooks:
    """Test user hooks"""

    def test_on_start_receives_session(self, uploads, mock_engine, temp_video_file):
        on_start = MagicMock()

        uploads.upload(str(temp_video_file), UploadOptions(on_start=on_start)).result(
            timeout=TIMEOUT
        )

        on_start.assert_called_once_with(mock_engine.get_last_session())
        assert on_start.call_args[0][0].url is not None

    def test_progress_forwarded_unchanged(self, credentials, api, mock_engine):
        controller = UploadController(credentials, api, mock_engine, chunk_size=4)
        progress = []

        controller.upload(
            b"0123456789",
            UploadOptions(on_progress=lambda done, total: progress.append((done, total))),
        ).result(timeout=TIMEOUT)

        assert progress == [(4, 10), (8, 10), (10, 10)]

    def test_on_start_fires_before_engine_events(self, credentials, api, mock_engine):
        controller = UploadController(credentials, api, mock_engine, chunk_size=4)
        calls = []

        controller.upload(
            b"01234567",
            UploadOptions(
                on_start=lambda session: calls.append("start"),
                on_progress=lambda done, total: calls.append(("progress", done)),
                on_success=lambda record: calls.append("success"),
            ),
        ).result(timeout=TIMEOUT)

        assert calls == ["start", ("progress", 4), ("progress", 8), "success"]

    def test_no_progress_after_settlement(self, credentials, api):
        controller = UploadController(credentials, api, LateProgressEngine())
        on_progress = MagicMock()
        on_error = MagicMock()

        future = controller.upload(
            b"data", UploadOptions(on_progress=on_progress, on_error=on_error)
        )

        with pytest.raises(TransportError, match="tus error"):
            future.result(timeout=TIMEOUT)

        on_error.assert_called_once()
        on_progress.assert_not_called()

    def test_hook_lists_called_in_order(self, uploads, temp_video_file):
        calls = []

        uploads.upload(
            str(temp_video_file),
            UploadOptions(
                on_success=[
                    lambda record: calls.append("first"),
                    None,
                    lambda record: calls.append("second"),
                ]
            ),
        ).result(timeout=TIMEOUT)

        assert calls == ["first", "second"]

    def test_failing_hook_does_not_block_settlement(self, uploads, temp_video_file):
        def broken(record):
            raise RuntimeError("hook failure")

        record = uploads.upload(
            str(temp_video_file), UploadOptions(on_success=broken)
        ).result(timeout=TIMEOUT)

        assert record is not None


# =============================================================================
# SESSION CONFIGURATION TESTS
# =============================================================================


class TestSessionConfig:
    """Test what the engine receives"""

    def test_endpoint_chunk_size_and_headers(
        self, uploads, mock_engine, credentials, temp_video_file
    ):
        uploads.upload(str(temp_video_file)).result(timeout=TIMEOUT)

        config = mock_engine.get_last_session().config
        assert config.endpoint == credentials.upload_endpoint
        assert config.chunk_size == 5242880
        assert config.headers == credentials.identity_headers

    def test_metadata_from_path(self, uploads, mock_engine, temp_video_file):
        uploads.upload(
            str(temp_video_file), UploadOptions(meta={"requireSignedURLs": "true"})
        ).result(timeout=TIMEOUT)

        assert mock_engine.get_last_session().config.metadata == {
            "requireSignedURLs": "true",
            "name": "clip",
            "type": "video/mp4",
        }

    def test_meta_option_not_mutated(self, uploads, temp_video_file):
        meta = {"owner": "coach"}

        uploads.upload(str(temp_video_file), UploadOptions(meta=meta)).result(
            timeout=TIMEOUT
        )

        assert meta == {"owner": "coach"}
