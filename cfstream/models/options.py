"""
Request and Upload Options

Transient per-call values. They are built by the caller (or by the
convenience methods on CloudflareStream) and discarded once the call settles.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

from cfstream.constants import DEFAULT_HTTP_METHOD

# A hook option accepts one callable, several, or nothing
Hook = Union[Callable[..., Any], Sequence[Callable[..., Any]], None]


@dataclass
class RequestOptions:
    """
    Options for a single REST call.

    Attributes:
        id: Video identifier (omit to address the whole collection)
        type: Sub-resource, "embed" or "preview" (other values are ignored)
        method: HTTP verb
        payload: Request body, sent only when present
        headers: Extra headers, layered on top of the identity headers

    Example:
        RequestOptions(id="ea95132c15732412d22c1476fa83f27a", type="preview")
    """

    id: Optional[str] = None
    type: Optional[str] = None
    method: str = DEFAULT_HTTP_METHOD
    payload: Optional[Union[bytes, str]] = None
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class UploadOptions:
    """
    Options for a single upload.

    Attributes:
        name: Video name (defaults to the file name for path uploads)
        meta: Extra tus metadata, copied before use
        on_start: Called with the upload session handle once started
        on_progress: Called with (bytes_uploaded, bytes_total)
        on_success: Called with the canonical video record
        on_error: Called with the failure (TransportError or StreamError)

    Each hook may be a callable, a sequence of callables, or None.
    """

    name: Optional[str] = None
    meta: Mapping[str, str] = field(default_factory=dict)
    on_start: Hook = None
    on_progress: Hook = None
    on_success: Hook = None
    on_error: Hook = None


# =============================================================================
# UPLOAD INPUT
# =============================================================================


@dataclass(frozen=True)
class FilePath:
    """Upload input read from the local filesystem"""

    path: str


@dataclass(frozen=True)
class InMemory:
    """Upload input already held in memory"""

    data: bytes


UploadInput = Union[FilePath, InMemory]


def to_upload_input(value: Any) -> Optional[UploadInput]:
    """
    Tag a raw upload argument once, at the orchestrator's entry point.

    Args:
        value: FilePath, InMemory, path-like, bytes-like, or None

    Returns:
        Tagged input, or None when nothing usable was given
    """
    if isinstance(value, (FilePath, InMemory)):
        return value
    if isinstance(value, (str, os.PathLike)):
        return FilePath(os.fspath(value))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return InMemory(bytes(value))
    return None
