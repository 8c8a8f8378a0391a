"""
Central Configuration File

ALL tunable values live here. This is the single source of truth.

Guidelines:
- Credentials (zone, email, key) are NEVER read from here or from .env,
  they are passed programmatically to CloudflareStream
- Import these settings in modules: from config.settings import STREAM_HTTP_TIMEOUT
- Protocol constants (paths, header names) belong in cfstream/constants.py
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# API CONFIGURATION
# =============================================================================

# Cloudflare API host (all REST calls and tus sessions go here)
CLOUDFLARE_API_HOST = "api.cloudflare.com"

# HTTP request timeout (seconds) for REST calls
STREAM_HTTP_TIMEOUT = float(os.getenv("STREAM_HTTP_TIMEOUT", "30"))

# Worker pool size for non-blocking REST calls (per client instance)
STREAM_MAX_WORKERS = int(os.getenv("STREAM_MAX_WORKERS", "4"))

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

# Retries are handled by the tus engine, never by the client itself
STREAM_UPLOAD_RETRIES = int(os.getenv("STREAM_UPLOAD_RETRIES", "3"))
STREAM_UPLOAD_RETRY_DELAY = int(os.getenv("STREAM_UPLOAD_RETRY_DELAY", "5"))  # seconds

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

STREAM_LOG_LEVEL = os.getenv("STREAM_LOG_LEVEL", "INFO")
STREAM_LOG_FORMAT = "%(message)s | %(name)s"
