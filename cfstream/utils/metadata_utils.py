"""
Upload Input and Metadata Utilities

Resolve a tagged upload input into bytes and derive the tus metadata
sent along with it.
"""

import os
from typing import Dict, Mapping, Optional

from cfstream.constants import MISSING_INPUT_MESSAGE, VIDEO_MIME_TYPES
from cfstream.exceptions import InputError
from cfstream.models.options import FilePath, InMemory, UploadInput


def read_upload_input(upload_input: Optional[UploadInput]) -> bytes:
    """
    Load the content of an upload input.

    File paths are read synchronously; in-memory data is used as-is.

    Args:
        upload_input: Tagged input (None if the caller gave nothing usable)

    Returns:
        Content to upload

    Raises:
        InputError: If there is no readable, non-empty content
    """
    if isinstance(upload_input, FilePath):
        try:
            with open(upload_input.path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise InputError(
                f"Cannot read upload file {upload_input.path}: {e}"
            ) from e
    elif isinstance(upload_input, InMemory):
        data = upload_input.data
    else:
        raise InputError(MISSING_INPUT_MESSAGE)

    if not data:
        raise InputError(MISSING_INPUT_MESSAGE)
    return data


def video_name_from_path(path: str) -> str:
    """
    Strip directory and extension from a file path.

    Example:
        video_name_from_path("/recordings/clip.mp4")  # "clip"
    """
    return os.path.splitext(os.path.basename(path))[0]


def derive_metadata(
    upload_input: UploadInput,
    name: Optional[str] = None,
    meta: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Build tus metadata for an upload.

    Starts from a copy of meta. "name" is set when given explicitly or
    when uploading a file path (file name without extension). "type" is
    set only for file paths with a known video extension.

    Args:
        upload_input: Tagged input
        name: Explicit video name (wins over the file name)
        meta: Extra metadata, never mutated

    Returns:
        New metadata dict

    Example:
        derive_metadata(FilePath("clip.mp4"))  # {"name": "clip", "type": "video/mp4"}
        derive_metadata(InMemory(b"..."))      # {}
    """
    metadata = dict(meta or {})
    is_path = isinstance(upload_input, FilePath)

    if name or is_path:
        metadata["name"] = name or video_name_from_path(upload_input.path)

    if is_path:
        extension = os.path.splitext(upload_input.path)[1].lower()
        mime_type = VIDEO_MIME_TYPES.get(extension)
        if mime_type:
            metadata["type"] = mime_type

    return metadata
