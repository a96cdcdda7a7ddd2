"""Options for CopyObject requests."""
from typing import Any, Callable, Dict

from .put import ACL_PRIVATE, ACL_PUBLIC_READ, SSE_KMS, SSE_S3


# Changes a parameter of a CopyObject request
CopyObjectInput = Callable[[Dict[str, Any]], None]


def acl_private() -> CopyObjectInput:
    def f(req):
        req["ACL"] = ACL_PRIVATE
    return f


def acl_public_read() -> CopyObjectInput:
    def f(req):
        req["ACL"] = ACL_PUBLIC_READ
    return f


def content_type(ct: str) -> CopyObjectInput:
    """
    Set Content-Type on the copy.

    S3 only applies it together with metadata_directive_replace.
    """
    def f(req):
        req["ContentType"] = ct
    return f


def metadata_directive_replace(meta: Dict[str, str]) -> CopyObjectInput:
    """Replace the source object's user metadata with meta."""
    meta = dict(meta)

    def f(req):
        req["MetadataDirective"] = "REPLACE"
        req["Metadata"] = dict(meta)
    return f


def sse_s3() -> CopyObjectInput:
    def f(req):
        req.pop("SSEKMSKeyId", None)
        req["ServerSideEncryption"] = SSE_S3
    return f


def sse_kms_key_id(key_id: str) -> CopyObjectInput:
    def f(req):
        req["SSEKMSKeyId"] = key_id
        req["ServerSideEncryption"] = SSE_KMS
    return f


def storage_class(value: str) -> CopyObjectInput:
    def f(req):
        req["StorageClass"] = value
    return f


def source_version_id(vid: str) -> CopyObjectInput:
    """Copy a specific version of the source object."""
    def f(req):
        req["CopySource"] = dict(req["CopySource"], VersionId=vid)
    return f
