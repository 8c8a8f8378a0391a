"""
Controllers Package

REST normalization and upload orchestration.
"""

from cfstream.controllers.api_controller import ApiController, normalize_response
from cfstream.controllers.upload_controller import UploadController, UploadJob

__all__ = [
    "ApiController",
    "UploadController",
    "UploadJob",
    "normalize_response",
]
