"""
API Controller

Request/response normalization for the Cloudflare Stream REST API:
builds paths from RequestOptions, sends the request through the HTTP
transport on a worker pool, and decodes the answer into a result or an
error.
"""

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Optional, Union
from urllib.parse import urljoin

from config.settings import STREAM_MAX_WORKERS
from cfstream.constants import DEFAULT_HTTP_METHOD, RECOGNIZED_VIEWS
from cfstream.credentials import Credentials
from cfstream.exceptions import ApiError
from cfstream.interfaces.transport_interface import (
    HttpRequest,
    HttpResponse,
    HttpTransportInterface,
)
from cfstream.models.options import RequestOptions


def normalize_response(text: str) -> Any:
    """
    Decode a response body into the call's result.

    Args:
        text: Raw response body

    Returns:
        The "result" field of a JSON body if present, otherwise the whole
        decoded JSON value; non-JSON bodies are returned verbatim

    Raises:
        ApiError: If the JSON body carries a non-empty "errors" list

    Example:
        normalize_response('{"result": {"foo": 1}}')  # {"foo": 1}
        normalize_response('<html>')                 # "<html>"
    """
    try:
        decoded = json.loads(text)
    except ValueError:
        # Not JSON (embed snippets are HTML)
        return text

    if isinstance(decoded, dict):
        errors = decoded.get("errors")
        if errors:
            raise ApiError(errors)
        if decoded.get("result") is not None:
            return decoded["result"]

    return decoded


class ApiController:
    """
    Non-blocking REST access to a zone's video collection.

    Every call returns a Future that settles exactly once. No state is
    shared between calls except the immutable credentials.

    Usage:
        api = ApiController(credentials, RequestsTransport())
        videos = api.request(RequestOptions()).result()
    """

    def __init__(
        self,
        credentials: Credentials,
        transport: HttpTransportInterface,
        max_workers: int = STREAM_MAX_WORKERS,
    ):
        """
        Initialize API controller.

        Args:
            credentials: Validated credentials
            transport: HTTP transport to send requests through
            max_workers: Size of the worker pool running requests
        """
        self.logger = logging.getLogger(__name__)
        self.credentials = credentials
        self.transport = transport
        self._base_url = f"https://{credentials.api_host}"
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="StreamApi-Worker",
        )

    def path(self, options: Optional[RequestOptions] = None) -> str:
        """
        Build the REST path for a request.

        Args:
            options: id and type of the target (None for the collection)

        Returns:
            Collection path, "/{id}" appended when an id is given, and
            "/{type}" appended when type is "embed" or "preview"

        Example:
            api.path(RequestOptions(id="X", type="preview"))
            # "/client/v4/zones/<zone>/media/X/preview"
        """
        options = options or RequestOptions()
        parts = [self.credentials.collection_path]

        if options.id:
            parts.append(options.id)
            if options.type in RECOGNIZED_VIEWS:
                parts.append(options.type)

        return "/".join(parts)

    def request(self, options: Union[str, RequestOptions, None] = None) -> "Future[Any]":
        """
        Issue a REST call without blocking.

        Args:
            options: A literal path (or absolute URL) sent as a bare GET,
                or RequestOptions

        Returns:
            Future resolving to the normalized result, or failing with
            ApiError / TransportError
        """
        http_request = self._build_request(options)
        return self._executor.submit(self._execute, http_request)

    def _build_request(self, options: Union[str, RequestOptions, None]) -> HttpRequest:
        if isinstance(options, str):
            path = options
            options = RequestOptions()
        else:
            options = options or RequestOptions()
            path = self.path(options)

        # Identity headers cannot be removed, only layered over
        headers = self.credentials.identity_headers
        headers.update(
            {
                name: value
                for name, value in (options.headers or {}).items()
                if value is not None
            }
        )

        return HttpRequest(
            method=(options.method or DEFAULT_HTTP_METHOD).upper(),
            url=urljoin(self._base_url, path),
            headers=headers,
            payload=options.payload or None,
        )

    def _execute(self, http_request: HttpRequest) -> Any:
        response: HttpResponse = self.transport.send(http_request)

        try:
            return normalize_response(response.text)
        except ApiError as e:
            self.logger.error(
                f"{http_request.method} {http_request.url} "
                f"returned errors (status {response.status}): {e.errors}",
            )
            raise

    def close(self) -> None:
        """Stop the worker pool (waits for running requests) and the transport"""
        self._executor.shutdown(wait=True)
        self.transport.close()
