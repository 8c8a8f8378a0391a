"""
Stream Constants

Centralized protocol configuration for the Cloudflare Stream client.
Tunables that may change per deployment live in config/settings.py.
"""

from enum import Enum

from config.settings import CLOUDFLARE_API_HOST

# =============================================================================
# CLOUDFLARE API CONFIGURATION
# =============================================================================

# Collection path for all video resources of a zone
# https://developers.cloudflare.com/stream/
MEDIA_PATH_TEMPLATE = "/client/v4/zones/{zone}/media"

# Fully-qualified tus endpoint (same resource as the collection path)
UPLOAD_ENDPOINT_TEMPLATE = f"https://{CLOUDFLARE_API_HOST}{MEDIA_PATH_TEMPLATE}"

# Identity headers sent with every REST call and every tus session
HEADER_AUTH_EMAIL = "X-Auth-Email"
HEADER_AUTH_KEY = "X-Auth-Key"

DEFAULT_HTTP_METHOD = "GET"

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

# Chunk size for resumable uploads (in bytes)
UPLOAD_CHUNK_SIZE = 5 * 1024 * 1024  # 5 MiB

# Video MIME types inferred from file extension (file path uploads only)
VIDEO_MIME_TYPES = {
    ".mp4": "video/mp4",
}

# =============================================================================
# RESOURCE VIEWS
# =============================================================================


class ResourceView(Enum):
    """Sub-resources of a single video that the API exposes"""

    EMBED = "embed"
    PREVIEW = "preview"


RECOGNIZED_VIEWS = frozenset(view.value for view in ResourceView)

# =============================================================================
# ERROR MESSAGES
# =============================================================================

FORBIDDEN_MESSAGE = "invalid credentials"
GENERIC_FAILURE_MESSAGE = "request failed"
MISSING_CREDENTIALS_MESSAGE = "Cloudflare credentials required: { zone, email, key }"
MISSING_INPUT_MESSAGE = "Input file required: upload(file, options)"
