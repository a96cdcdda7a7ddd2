"""Options for PutObject requests."""
from typing import Any, Callable, Dict


# Changes a parameter of a PutObject request
PutObjectInput = Callable[[Dict[str, Any]], None]

SSE_KMS = "aws:kms"
SSE_S3 = "AES256"

ACL_PRIVATE = "private"
ACL_PUBLIC_READ = "public-read"


def sse_kms_key_id(key_id: str) -> PutObjectInput:
    """Encrypt the object with SSE-KMS using key_id."""
    def f(req):
        req["SSEKMSKeyId"] = key_id
        req["ServerSideEncryption"] = SSE_KMS
    return f


def sse_s3() -> PutObjectInput:
    """Encrypt the object with SSE-S3 (AES256)."""
    def f(req):
        req.pop("SSEKMSKeyId", None)
        req["ServerSideEncryption"] = SSE_S3
    return f


def acl_private() -> PutObjectInput:
    def f(req):
        req["ACL"] = ACL_PRIVATE
    return f


def acl_public_read() -> PutObjectInput:
    def f(req):
        req["ACL"] = ACL_PUBLIC_READ
    return f


def content_type(ct: str) -> PutObjectInput:
    def f(req):
        req["ContentType"] = ct
    return f


def content_length(length: int) -> PutObjectInput:
    def f(req):
        req["ContentLength"] = int(length)
    return f


def cache_control(value: str) -> PutObjectInput:
    def f(req):
        req["CacheControl"] = value
    return f


def content_disposition(value: str) -> PutObjectInput:
    def f(req):
        req["ContentDisposition"] = value
    return f


def content_encoding(value: str) -> PutObjectInput:
    def f(req):
        req["ContentEncoding"] = value
    return f


def metadata(meta: Dict[str, str]) -> PutObjectInput:
    """Attach user metadata (x-amz-meta-*) to the object."""
    meta = dict(meta)

    def f(req):
        req["Metadata"] = dict(meta)
    return f


def storage_class(value: str) -> PutObjectInput:
    """Set the storage class, e.g. STANDARD_IA or GLACIER."""
    def f(req):
        req["StorageClass"] = value
    return f
