"""Per-bucket helpers for S3-compatible object storage."""

from .bucket import Bucket, PreparedRequest, is_not_found
from .client import (
    ClientConfig,
    new_client,
    StorageError,
    StorageConnectionError,
    StorageAuthError,
    RequestCanceledError,
)
from . import option

__all__ = [
    "Bucket",
    "PreparedRequest",
    "is_not_found",
    "ClientConfig",
    "new_client",
    "StorageError",
    "StorageConnectionError",
    "StorageAuthError",
    "RequestCanceledError",
    "option",
]
