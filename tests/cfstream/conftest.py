"""
Stream Test Configuration and Fixtures

This file contains pytest fixtures shared across cfstream tests.
No fixture touches the network: REST calls go to MockTransport and
uploads to MockUploadEngine.

To use pytest:
    pip install -e .[test]
    pytest tests/cfstream/
"""

import pytest

from cfstream.client import CloudflareStream
from cfstream.controllers.api_controller import ApiController
from cfstream.controllers.upload_controller import UploadController
from cfstream.credentials import Credentials
from cfstream.implementations.mock_engine import MockUploadEngine
from cfstream.implementations.mock_transport import MockTransport


# =============================================================================
# CREDENTIAL FIXTURES
# =============================================================================


@pytest.fixture
def credential_mapping():
    """Valid {zone, email, key} mapping (a fresh dict per test)"""
    return {
        "zone": "023e105f4ecef8ad9ca31a8372d0c353",
        "email": "user@example.com",
        "key": "c2547eb745079dac9320b638f5e225cf483cc5cfdda41",
    }


@pytest.fixture
def credentials(credential_mapping):
    return Credentials.from_mapping(credential_mapping)


# =============================================================================
# TRANSPORT FIXTURES
# =============================================================================


@pytest.fixture
def mock_transport():
    """
    Provide a fresh MockTransport for each test.

    Usage:
        def test_something(mock_transport):
            mock_transport.queue_json({"result": {"uid": "abc"}})
    """
    return MockTransport()


@pytest.fixture
def mock_engine():
    """Provide a MockUploadEngine that always succeeds"""
    return MockUploadEngine()


# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================


@pytest.fixture
def api(credentials, mock_transport):
    controller = ApiController(credentials, mock_transport, max_workers=2)
    yield controller
    controller.close()


@pytest.fixture
def uploads(credentials, api, mock_engine):
    return UploadController(credentials, api, mock_engine)


@pytest.fixture
def stream(credential_mapping, mock_transport, mock_engine):
    """Provide a CloudflareStream wired to the mocks"""
    client = CloudflareStream(
        credential_mapping,
        transport=mock_transport,
        engine=mock_engine,
        max_workers=2,
    )
    yield client
    client.close()


# =============================================================================
# FILE FIXTURES
# =============================================================================


@pytest.fixture
def temp_video_file(tmp_path):
    """
    Create a temporary .mp4 file for testing.

    Automatically cleaned up with tmp_path.
    """
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"0" * 1024)
    return path
