"""
Client Factory

Factory pattern for wiring CloudflareStream to its transports.
Credentials are always passed in; nothing is read from the environment.
"""

import logging
from typing import Any, Literal, Mapping, Union

from cfstream.client import CloudflareStream
from cfstream.credentials import Credentials
from cfstream.implementations.mock_engine import MockUploadEngine
from cfstream.implementations.mock_transport import MockTransport
from cfstream.implementations.requests_transport import RequestsTransport
from cfstream.implementations.tus_engine import TusUploadEngine

# Type alias
ClientMode = Literal["live", "mock"]


class StreamClientFactory:
    """
    Factory for creating CloudflareStream clients.

    Usage:
        # Real API (requests + tuspy)
        stream = StreamClientFactory.create_client(credentials)

        # In-memory mocks for testing
        stream = StreamClientFactory.create_client(credentials, mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_client(
        cls,
        credentials: Union[Credentials, Mapping[str, Any]],
        mode: ClientMode = "live",
    ) -> CloudflareStream:
        """
        Create a client instance.

        Args:
            credentials: {zone, email, key} mapping or Credentials
            mode: "live" (requests + tuspy) or "mock" (in-memory)

        Returns:
            Configured CloudflareStream

        Raises:
            ConfigurationError: If credentials are incomplete
            ValueError: If mode is unknown
        """
        if mode == "mock":
            cls._logger.info("Creating Cloudflare Stream client (mock)")
            return CloudflareStream(
                credentials,
                transport=MockTransport(),
                engine=MockUploadEngine(),
            )

        if mode == "live":
            cls._logger.info("Creating Cloudflare Stream client (live)")
            return CloudflareStream(
                credentials,
                transport=RequestsTransport(),
                engine=TusUploadEngine(),
            )

        raise ValueError(f"Unknown client mode: {mode}")


# Convenience function for quick creation
def create_client(
    credentials: Union[Credentials, Mapping[str, Any]],
    force_mock: bool = False,
) -> CloudflareStream:
    """
    Quick client creation with simple mock override.

    Example:
        stream = create_client({"zone": "...", "email": "...", "key": "..."})
        videos = stream.get_list().result()
    """
    mode: ClientMode = "mock" if force_mock else "live"
    return StreamClientFactory.create_client(credentials, mode=mode)
