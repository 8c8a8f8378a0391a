"""
Cloudflare Stream Client

One convenience object binding the REST API and resumable uploads for a
single zone. Every operation returns a concurrent.futures.Future.
"""

import logging
from concurrent.futures import Future
from typing import Any, Mapping, Optional, Union

from cfstream.constants import ResourceView
from cfstream.controllers.api_controller import ApiController
from cfstream.controllers.upload_controller import UploadController
from cfstream.credentials import Credentials
from cfstream.interfaces.transport_interface import HttpTransportInterface
from cfstream.interfaces.upload_engine_interface import UploadEngineInterface
from cfstream.models.options import RequestOptions, UploadOptions


class CloudflareStream:
    """
    Cloudflare Stream API client.

    Usage:
        with CloudflareStream(
            {"zone": "023e105f4ecef8ad", "email": "me@example.com", "key": "c2547eb7"},
            transport=RequestsTransport(),
            engine=TusUploadEngine(),
        ) as stream:
            record = stream.upload("/videos/clip.mp4").result()
            snippet = stream.get_embed(record["uid"]).result()

    Use cfstream.factory.create_client() to get the live transports wired in.
    """

    def __init__(
        self,
        credentials: Union[Credentials, Mapping[str, Any]],
        transport: HttpTransportInterface,
        engine: UploadEngineInterface,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize client.

        Args:
            credentials: {zone, email, key} mapping or Credentials
            transport: HTTP transport for REST calls
            engine: Resumable upload engine
            max_workers: REST worker pool size (default from settings)

        Raises:
            ConfigurationError: If zone, email or key is missing or empty
        """
        self.logger = logging.getLogger(__name__)
        self.credentials = Credentials.from_mapping(credentials)

        api_kwargs = {} if max_workers is None else {"max_workers": max_workers}
        self._api = ApiController(self.credentials, transport, **api_kwargs)
        self._uploads = UploadController(self.credentials, self._api, engine)

        self.logger.info(f"Cloudflare Stream client initialized (zone: {self.credentials.zone})")

    # =========================================================================
    # LOW-LEVEL ACCESS
    # =========================================================================

    def path(self, options: Optional[RequestOptions] = None) -> str:
        """REST path for options (see ApiController.path)"""
        return self._api.path(options)

    def request(self, options: Union[str, RequestOptions, None] = None) -> "Future[Any]":
        """Raw REST call, path string or RequestOptions (see ApiController.request)"""
        return self._api.request(options)

    def upload(self, file: Any = None, options: Optional[UploadOptions] = None) -> "Future[Any]":
        """Resumable upload of a file path or bytes (see UploadController.upload)"""
        return self._uploads.upload(file, options)

    @property
    def engine(self) -> UploadEngineInterface:
        """Upload engine in use, for advanced session handling"""
        return self._uploads.engine

    # =========================================================================
    # API METHODS
    # =========================================================================

    def get_list(self) -> "Future[Any]":
        return self.request(RequestOptions())

    def get_video(self, video_id: str) -> "Future[Any]":
        return self.request(RequestOptions(id=video_id))

    def get_link(self, video_id: str) -> "Future[Any]":
        """Preview page link of a video"""
        return self.request(RequestOptions(id=video_id, type=ResourceView.PREVIEW.value))

    def get_embed(self, video_id: str) -> "Future[Any]":
        """HTML embed snippet of a video"""
        return self.request(RequestOptions(id=video_id, type=ResourceView.EMBED.value))

    def delete_video(self, video_id: str) -> "Future[Any]":
        return self.request(RequestOptions(id=video_id, method="DELETE"))

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def close(self) -> None:
        """
        Release worker threads and connections.

        Running REST calls finish first; tus sessions already started keep
        running on their own threads, but their record fetch can no longer
        be scheduled, so their Futures fail with the pool's RuntimeError.
        """
        self._api.close()
        self.logger.info("Cloudflare Stream client closed")

    def __enter__(self) -> "CloudflareStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
