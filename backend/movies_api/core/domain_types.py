"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - MovieId wraps int — route handlers never pass the raw path string downstream
    - STORE_INT_MIN..STORE_INT_MAX is the range an INTEGER column can hold
    - StoreErrorCode values are the public 1001-1006 codes, one per collection operation

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - IntEnum for error codes: serializes to a plain JSON number
"""

from enum import Enum, IntEnum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MovieId = NewType("MovieId", int)

# Bounds of the INTEGER columns (id, year): signed 32-bit on every supported store
STORE_INT_MIN = -(2 ** 31)
STORE_INT_MAX = 2 ** 31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class MovieOperation(str, Enum):
    """The collection operations — used as the `operation` log field."""
    LIST = "list"
    GET = "get"
    CREATE = "create"
    REPLACE = "replace"
    PATCH = "patch"
    DELETE = "delete"


class StoreErrorCode(IntEnum):
    """Numeric domain code returned with every store failure."""
    LIST_FAILED = 1001
    GET_FAILED = 1002
    CREATE_FAILED = 1003
    REPLACE_FAILED = 1004
    PATCH_FAILED = 1005
    DELETE_FAILED = 1006


STORE_ERROR_MESSAGES: dict[StoreErrorCode, str] = {
    StoreErrorCode.LIST_FAILED: "Error retrieving movies",
    StoreErrorCode.GET_FAILED: "Error retrieving movie",
    StoreErrorCode.CREATE_FAILED: "Error creating movie",
    StoreErrorCode.REPLACE_FAILED: "Error updating/creating movie",
    StoreErrorCode.PATCH_FAILED: "Error updating movie",
    StoreErrorCode.DELETE_FAILED: "Error deleting movie",
}

OPERATION_ERROR_CODES: dict[MovieOperation, StoreErrorCode] = {
    MovieOperation.LIST: StoreErrorCode.LIST_FAILED,
    MovieOperation.GET: StoreErrorCode.GET_FAILED,
    MovieOperation.CREATE: StoreErrorCode.CREATE_FAILED,
    MovieOperation.REPLACE: StoreErrorCode.REPLACE_FAILED,
    MovieOperation.PATCH: StoreErrorCode.PATCH_FAILED,
    MovieOperation.DELETE: StoreErrorCode.DELETE_FAILED,
}
