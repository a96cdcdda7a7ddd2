"""
S3 client construction and storage errors.

Supports AWS S3, Cloudflare R2, Google Cloud Storage (interoperability mode)
and MinIO via the S3 API.
"""
import os
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import (
    NoCredentialsError,
    PartialCredentialsError,
    BotoCoreError,
)


logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base storage error."""
    pass


class StorageConnectionError(StorageError):
    """Storage client could not be created."""
    pass


class StorageAuthError(StorageError):
    """Storage credentials are missing or incomplete."""
    pass


class RequestCanceledError(StorageError):
    """A paged request was cancelled through its cancellation token."""
    pass


PROVIDERS = ("aws", "cloudflare", "gcs", "minio")

# GCS interoperability endpoint
GCS_ENDPOINT = "https://storage.googleapis.com"


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for an S3-compatible provider."""
    bucket_name: str
    provider: str = "aws"
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    region: str = "auto"
    endpoint_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Load configuration from environment variables.

        Raises:
            StorageAuthError: Bucket or required credentials are missing
        """
        provider = os.getenv("STORAGE_PROVIDER", "aws").strip().lower()
        bucket_name = os.getenv("STORAGE_BUCKET")
        access_key = os.getenv("STORAGE_ACCESS_KEY_ID")
        secret_key = os.getenv("STORAGE_SECRET_ACCESS_KEY")

        missing = []
        if not bucket_name:
            missing.append("STORAGE_BUCKET")
        # AWS can fall back to the default credential chain
        if provider != "aws":
            if not access_key:
                missing.append("STORAGE_ACCESS_KEY_ID")
            if not secret_key:
                missing.append("STORAGE_SECRET_ACCESS_KEY")
        if missing:
            raise StorageAuthError(
                f"Missing required storage settings: {', '.join(missing)}. "
                "Check environment variables."
            )

        return cls(
            bucket_name=bucket_name,
            provider=provider,
            access_key=access_key,
            secret_key=secret_key,
            region=os.getenv("STORAGE_REGION", "auto"),
            endpoint_url=os.getenv("STORAGE_ENDPOINT_URL") or None,
        )

    def client_kwargs(self) -> Dict[str, Any]:
        """Build keyword arguments for boto3.client('s3', ...)."""
        kwargs: Dict[str, Any] = {}
        if self.access_key and self.secret_key:
            kwargs['aws_access_key_id'] = self.access_key
            kwargs['aws_secret_access_key'] = self.secret_key
        elif self.access_key or self.secret_key:
            raise StorageAuthError(
                "Incomplete storage credentials. Check both access key and secret key."
            )

        if self.provider == "cloudflare":
            if self.endpoint_url:
                kwargs['endpoint_url'] = self.endpoint_url
            kwargs['config'] = Config(signature_version='s3v4')
        elif self.provider == "aws":
            if self.region != "auto":
                kwargs['region_name'] = self.region
            if self.endpoint_url:
                kwargs['endpoint_url'] = self.endpoint_url
            kwargs['config'] = Config(signature_version='s3v4')
        elif self.provider == "gcs":
            kwargs['endpoint_url'] = self.endpoint_url or GCS_ENDPOINT
            kwargs['region_name'] = self.region if self.region != "auto" else "us"
        elif self.provider == "minio":
            if not self.endpoint_url:
                raise ValueError("STORAGE_ENDPOINT_URL is required for the minio provider")
            kwargs['endpoint_url'] = self.endpoint_url
            kwargs['region_name'] = self.region if self.region != "auto" else "us-east-1"
            kwargs['config'] = Config(
                signature_version='s3v4',
                s3={'addressing_style': 'path'},
            )
        else:
            raise ValueError(f"Unknown storage provider: {self.provider}")

        return kwargs


def new_client(config: ClientConfig):
    """
    Create a boto3 S3 client for the configured provider.

    Raises:
        StorageAuthError: Credentials are incomplete or not found
        StorageConnectionError: Client creation failed
        ValueError: Unknown provider
    """
    kwargs = config.client_kwargs()

    try:
        client = boto3.client('s3', **kwargs)
    except (NoCredentialsError, PartialCredentialsError) as e:
        raise StorageAuthError(f"Storage credentials not usable: {e}") from e
    except BotoCoreError as e:
        raise StorageConnectionError(
            f"Failed to initialize storage client: {e}"
        ) from e

    logger.info(
        f"Initialized {config.provider} S3 client for bucket: {config.bucket_name}"
    )
    return client
