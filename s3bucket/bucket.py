"""
Per-bucket helpers over an S3 client.

A Bucket binds a boto3 S3 client and a bucket name. Every method builds the
request parameters for one S3 operation, applies the given options in order
and forwards the request to the client.
"""
import io
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from botocore.exceptions import ClientError

from .client import ClientConfig, RequestCanceledError, new_client
from .option import (
    CopyObjectInput,
    GetObjectInput,
    HeadObjectInput,
    ListObjectsInput,
    ListObjectsV2Input,
    ListObjectVersionsInput,
    PutObjectInput,
)


logger = logging.getLogger(__name__)

PageFunc = Callable[[Dict[str, Any], bool], bool]

Body = Union[bytes, bytearray, io.IOBase]


def _apply(req: Dict[str, Any], opts) -> Dict[str, Any]:
    for f in opts:
        f(req)
    return req


def is_not_found(err: Exception) -> bool:
    """Return True when err is a ClientError carrying an HTTP 404 status."""
    if not isinstance(err, ClientError):
        return False
    meta = err.response.get("ResponseMetadata") or {}
    if meta.get("HTTPStatusCode") == 404:
        return True
    # HEAD responses have no body, botocore reports the status as the code
    return (err.response.get("Error") or {}).get("Code") in ("404", "NotFound", "NoSuchKey")


@dataclass
class PreparedRequest:
    """
    An unsent S3 request, ready to be sent or presigned.

    For get_object_request, send() returns the GetObject response dict
    (Body, ContentLength, ETag, ...).
    """
    client: Any = field(repr=False)
    operation_name: str
    params: Dict[str, Any]

    def send(self) -> Dict[str, Any]:
        """Send the request and return the operation's response."""
        return getattr(self.client, self.operation_name)(**self.params)

    def presign(self, expires_in: int = 3600, http_method: Optional[str] = None) -> str:
        """Generate a presigned URL for the request."""
        return self.client.generate_presigned_url(
            self.operation_name,
            Params=self.params,
            ExpiresIn=expires_in,
            HttpMethod=http_method,
        )


class Bucket:
    """An S3 bucket bound to the client used to reach it."""

    # Service limit for a single DeleteObjects request
    MAX_DELETE_OBJECTS = 1000

    def __init__(self, s3, name: str):
        self._s3 = s3
        self._name = name

    @classmethod
    def from_env(cls) -> "Bucket":
        """Create a Bucket from STORAGE_* environment variables."""
        config = ClientConfig.from_env()
        return cls(new_client(config), config.bucket_name)

    @property
    def s3(self):
        return self._s3

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Bucket(name={self._name!r})"

    def _object_request(self, key: str) -> Dict[str, Any]:
        return {"Bucket": self._name, "Key": key}

    def get_object(self, key: str, *opts: GetObjectInput) -> Dict[str, Any]:
        """Return the GetObject response for key."""
        req = _apply(self._object_request(key), opts)
        logger.debug(f"GetObject {self._name}/{key}")
        return self._s3.get_object(**req)

    def get_object_reader(self, key: str, *opts: GetObjectInput):
        """
        Return the body stream of the object at key.

        The caller MUST close the returned stream when it finishes reading.
        """
        return self.get_object(key, *opts)["Body"]

    def get_object_request(self, key: str, *opts: GetObjectInput) -> PreparedRequest:
        """Build an unsent GetObject request for key."""
        req = _apply(self._object_request(key), opts)
        return PreparedRequest(self._s3, "get_object", req)

    def head_object(self, key: str, *opts: HeadObjectInput) -> Dict[str, Any]:
        """Retrieve the metadata of the object at key."""
        req = _apply(self._object_request(key), opts)
        logger.debug(f"HeadObject {self._name}/{key}")
        return self._s3.head_object(**req)

    def exists_object(self, key: str, *opts: HeadObjectInput) -> bool:
        """
        Return True if key exists in the bucket.

        A 404 from HeadObject means the key does not exist. Any other
        failure is raised unchanged.
        """
        try:
            self.head_object(key, *opts)
        except ClientError as e:
            if is_not_found(e):
                logger.debug(f"Object {self._name}/{key} does not exist")
                return False
            raise
        return True

    def put_object(self, key: str, body: Body, *opts: PutObjectInput) -> Dict[str, Any]:
        """
        Put an object with data read from body.

        body must be bytes or a seekable file object so the request can be
        signed and retried without consuming the source.
        """
        if not isinstance(body, (bytes, bytearray)):
            seekable = getattr(body, "seekable", None)
            if seekable is None or not seekable():
                raise TypeError(
                    f"put_object body must be bytes or a seekable file object, "
                    f"got {type(body).__name__}"
                )

        req = _apply({"Bucket": self._name, "Key": key, "Body": body}, opts)
        logger.debug(f"PutObject {self._name}/{key}")
        return self._s3.put_object(**req)

    def delete_object(self, key: str) -> Dict[str, Any]:
        """Delete the object at key."""
        logger.debug(f"DeleteObject {self._name}/{key}")
        return self._s3.delete_object(**self._object_request(key))

    def delete_objects(self, identifiers: List[Dict[str, str]]) -> Dict[str, Any]:
        """
        Delete each object in identifiers ({"Key": ..., "VersionId": ...}).

        At most MAX_DELETE_OBJECTS identifiers may be passed per call.
        """
        req = {
            "Bucket": self._name,
            "Delete": {"Objects": identifiers},
        }
        logger.debug(f"DeleteObjects {self._name} ({len(identifiers)} keys)")
        return self._s3.delete_objects(**req)

    def list_objects(self, prefix: str, *opts: ListObjectsInput) -> Dict[str, Any]:
        """List one page of objects that have prefix."""
        req = _apply({"Bucket": self._name, "Prefix": prefix}, opts)
        logger.debug(f"ListObjects {self._name}/{prefix}")
        return self._s3.list_objects(**req)

    def list_objects_v2_pages(
        self,
        ctx,
        prefix: str,
        page_func: PageFunc,
        *opts: ListObjectsV2Input,
    ) -> None:
        """
        Page through objects with the given prefix.

        page_func(page, last_page) is called once per page and returns
        whether to continue. ctx is an optional cancellation token such as
        threading.Event, checked before each page is fetched.
        """
        req = _apply({"Bucket": self._name, "Prefix": prefix}, opts)
        self._paginate(ctx, "list_objects_v2", req, page_func)

    def list_object_versions_pages(
        self,
        ctx,
        prefix: str,
        page_func: PageFunc,
        *opts: ListObjectVersionsInput,
    ) -> None:
        """Page through all versions of all objects with the given prefix."""
        req = _apply({"Bucket": self._name, "Prefix": prefix}, opts)
        self._paginate(ctx, "list_object_versions", req, page_func)

    def _paginate(self, ctx, operation_name: str, req: Dict[str, Any], page_func: PageFunc) -> None:
        logger.debug(f"Paginating {operation_name} {self._name}/{req['Prefix']}")
        pages = iter(self._s3.get_paginator(operation_name).paginate(**req))
        while True:
            if ctx is not None and ctx.is_set():
                logger.info(f"{operation_name} on {self._name} cancelled")
                raise RequestCanceledError(f"{operation_name} on {self._name} cancelled")
            page = next(pages, None)
            if page is None:
                return
            last_page = not page.get("IsTruncated", False)
            if not page_func(page, last_page) or last_page:
                return

    def copy_object(self, dest: str, src: str, *opts: CopyObjectInput) -> Dict[str, Any]:
        """Copy the object at src to dest within the bucket."""
        req = _apply({
            "Bucket": self._name,
            "Key": dest,
            # botocore percent-encodes the key when it builds x-amz-copy-source
            "CopySource": {"Bucket": self._name, "Key": src},
        }, opts)
        logger.debug(f"CopyObject {self._name}/{src} -> {self._name}/{dest}")
        return self._s3.copy_object(**req)
