"""Domain Types — verifies identity types and the store error code table."""

from movies_api.core.domain_types import (
    MovieId, MovieOperation, OPERATION_ERROR_CODES, STORE_ERROR_MESSAGES,
    StoreErrorCode,
)


def test_movie_id_wraps_int():
    assert MovieId(3) == 3


def test_store_error_codes_span_1001_to_1006():
    assert [int(c) for c in StoreErrorCode] == list(range(1001, 1007))


def test_every_operation_has_a_distinct_code_and_message():
    codes = [OPERATION_ERROR_CODES[op] for op in MovieOperation]
    assert len(set(codes)) == len(MovieOperation)
    assert set(STORE_ERROR_MESSAGES) == set(StoreErrorCode)


def test_enums_serialize_to_plain_values():
    assert MovieOperation.REPLACE.value == "replace"
    assert StoreErrorCode.GET_FAILED == 1002
