"""Options for GetObject requests."""
from typing import Any, Callable, Dict, Optional


# Changes a parameter of a GetObject request
GetObjectInput = Callable[[Dict[str, Any]], None]


def http_range(start: int, end: Optional[int] = None) -> str:
    """Format an HTTP Range header value; end is inclusive."""
    if start < 0:
        raise ValueError(f"range start must not be negative: {start}")
    if end is None:
        return f"bytes={start}-"
    if end < start:
        raise ValueError(f"range end {end} is before start {start}")
    return f"bytes={start}-{end}"


def range_bytes(start: int, end: Optional[int] = None) -> GetObjectInput:
    """Fetch only bytes start..end (inclusive) of the object."""
    value = http_range(start, end)

    def f(req):
        req["Range"] = value
    return f


def version_id(vid: str) -> GetObjectInput:
    def f(req):
        req["VersionId"] = vid
    return f


def if_match(etag: str) -> GetObjectInput:
    def f(req):
        req["IfMatch"] = etag
    return f


def if_none_match(etag: str) -> GetObjectInput:
    def f(req):
        req["IfNoneMatch"] = etag
    return f


def response_content_type(ct: str) -> GetObjectInput:
    """Override the Content-Type header of the response."""
    def f(req):
        req["ResponseContentType"] = ct
    return f


def response_content_disposition(value: str) -> GetObjectInput:
    def f(req):
        req["ResponseContentDisposition"] = value
    return f
