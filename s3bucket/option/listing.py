"""Options for ListObjects, ListObjectsV2 and ListObjectVersions requests."""
from typing import Any, Callable, Dict


# Changes a parameter of a ListObjects request
ListObjectsInput = Callable[[Dict[str, Any]], None]

# Changes a parameter of a ListObjectsV2 request
ListObjectsV2Input = Callable[[Dict[str, Any]], None]

# Changes a parameter of a ListObjectVersions request
ListObjectVersionsInput = Callable[[Dict[str, Any]], None]


def _set(name: str, value):
    def f(req):
        req[name] = value
    return f


# ListObjects

def delimiter(value: str) -> ListObjectsInput:
    """Group keys sharing a prefix up to value into CommonPrefixes."""
    return _set("Delimiter", value)


def marker(value: str) -> ListObjectsInput:
    """Start listing after the key value."""
    return _set("Marker", value)


def max_keys(n: int) -> ListObjectsInput:
    return _set("MaxKeys", int(n))


# ListObjectsV2

def v2_delimiter(value: str) -> ListObjectsV2Input:
    return _set("Delimiter", value)


def start_after(key: str) -> ListObjectsV2Input:
    return _set("StartAfter", key)


def v2_max_keys(n: int) -> ListObjectsV2Input:
    """Limit the number of keys per page."""
    return _set("MaxKeys", int(n))


def fetch_owner() -> ListObjectsV2Input:
    return _set("FetchOwner", True)


def continuation_token(token: str) -> ListObjectsV2Input:
    """Resume a listing from a NextContinuationToken."""
    return _set("ContinuationToken", token)


# ListObjectVersions

def versions_delimiter(value: str) -> ListObjectVersionsInput:
    return _set("Delimiter", value)


def key_marker(key: str) -> ListObjectVersionsInput:
    return _set("KeyMarker", key)


def version_id_marker(vid: str) -> ListObjectVersionsInput:
    """Used together with key_marker to resume a version listing."""
    return _set("VersionIdMarker", vid)


def versions_max_keys(n: int) -> ListObjectVersionsInput:
    return _set("MaxKeys", int(n))
