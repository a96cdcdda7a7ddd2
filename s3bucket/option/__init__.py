"""
Request options for Bucket operations.

Each option constructor returns a callable that changes one parameter of a
single request kind. Options are applied in the order given, so the last one
setting a parameter wins.
"""

from . import copy, get, head, listing, put
from .copy import CopyObjectInput
from .get import GetObjectInput
from .head import HeadObjectInput
from .listing import ListObjectsInput, ListObjectsV2Input, ListObjectVersionsInput
from .put import PutObjectInput

__all__ = [
    "copy",
    "get",
    "head",
    "listing",
    "put",
    "CopyObjectInput",
    "GetObjectInput",
    "HeadObjectInput",
    "ListObjectsInput",
    "ListObjectsV2Input",
    "ListObjectVersionsInput",
    "PutObjectInput",
]
