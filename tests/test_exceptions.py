import pytest

from offset_page import InvalidPaginationArgumentError, InvalidPaginationResultError, PaginationError


def test_invalid_parameter_message_and_parameters():
    err = InvalidPaginationArgumentError.for_invalid_parameter("offset", -5, "number of items to skip")
    assert str(err) == (
        "offset must be greater than or equal to zero, got -5. "
        "Use a non-negative integer to specify the number of items to skip."
    )
    assert err.parameters == {"offset": -5}
    assert err.get_parameter("offset") == -5
    assert err.get_parameter("limit") is None


def test_invalid_zero_limit_carries_all_values():
    err = InvalidPaginationArgumentError.for_invalid_zero_limit(10, 0, 3)
    assert err.parameters == {"offset": 10, "limit": 0, "delivered": 3}
    assert "offset=10, limit=0, delivered=3" in err.message


def test_non_integer_names_type():
    err = InvalidPaginationArgumentError.for_non_integer("limit", 2.5, "maximum number of items to return")
    assert err.message.startswith("limit must be an integer, got float.")


def test_callback_result_without_context():
    err = InvalidPaginationResultError.for_invalid_callback_result([1], "Iterator")
    assert str(err) == "Callback must return Iterator, got list"
    assert err.code == "INVALID_RESULT"


def test_source_result_names_source_class():
    class DummySource:
        pass

    err = InvalidPaginationResultError.for_invalid_source_result(None, "Iterator", DummySource())
    assert str(err) == "Source DummySource.fetch must return Iterator, got NoneType"
    assert err.details["context"] == "DummySource.fetch"


@pytest.mark.parametrize("err", [
    InvalidPaginationArgumentError.for_invalid_parameter("limit", -1, "limit"),
    InvalidPaginationArgumentError.for_invalid_zero_limit(1, 0, 0),
    InvalidPaginationResultError.for_invalid_callback_result(None, "Iterator"),
])
def test_all_errors_share_base(err):
    assert isinstance(err, PaginationError)
    with pytest.raises(PaginationError):
        raise err


def test_base_error_defaults():
    err = PaginationError("boom")
    assert err.message == "boom"
    assert err.code == "PAGINATION_ERROR"
    assert err.details == {}
