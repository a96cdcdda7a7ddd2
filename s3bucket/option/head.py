"""Options for HeadObject requests."""
from typing import Any, Callable, Dict, Optional

from .get import http_range


# Changes a parameter of a HeadObject request
HeadObjectInput = Callable[[Dict[str, Any]], None]


def version_id(vid: str) -> HeadObjectInput:
    def f(req):
        req["VersionId"] = vid
    return f


def range_bytes(start: int, end: Optional[int] = None) -> HeadObjectInput:
    value = http_range(start, end)

    def f(req):
        req["Range"] = value
    return f


def if_match(etag: str) -> HeadObjectInput:
    def f(req):
        req["IfMatch"] = etag
    return f


def if_none_match(etag: str) -> HeadObjectInput:
    def f(req):
        req["IfNoneMatch"] = etag
    return f
