"""Error Hierarchy: public payload shape and hidden internal cause."""

from grouporders.core.domain_types import ErrorCode
from grouporders.core.errors import (
    ErrorContext, ErrorCategory, GroupOrdersError,
    OrderPlacementError, OrderUpdateError, OrderDeleteError,
    ResourceNotFoundError, DatabaseError, EmailAlreadyRegisteredError,
)


def test_placement_error_payload():
    err = OrderPlacementError()
    assert err.to_response() == {
        "message": "there was an error placing your order.",
        "code": "GENERIC_ERROR",
        "httpStatus": 400,
    }


def test_update_error_payload():
    err = OrderUpdateError()
    assert err.to_response() == {
        "message": "there was an error updating the requested resource",
        "code": "GENERIC_UPDATE_ERROR",
        "httpStatus": 400,
    }


def test_delete_error_payload():
    err = OrderDeleteError()
    assert err.to_response() == {
        "message": "there was an error deleting the requested resource",
        "code": "GENERIC_DELETE_ERROR",
        "httpStatus": 400,
    }


def test_debug_info_never_reaches_response():
    err = OrderPlacementError(
        ErrorContext(user_id="u1", debug_info={"reason": "already_ordered"}),
    )
    payload = err.to_response()
    assert set(payload) == {"message", "code", "httpStatus"}
    assert "already_ordered" not in str(payload)


def test_log_extra_carries_rejection_reason():
    err = OrderDeleteError(
        ErrorContext(order_id="o1", debug_info={"reason": "not_order_owner"}),
    )
    extra = err.log_extra()
    assert extra["rejection_reason"] == "not_order_owner"
    assert extra["error_code"] == "GENERIC_DELETE_ERROR"
    assert extra["order_id"] == "o1"


def test_all_errors_share_base_class():
    for err in (
        OrderPlacementError(), OrderUpdateError(), OrderDeleteError(),
        ResourceNotFoundError("Order", "x"), EmailAlreadyRegisteredError(),
        DatabaseError("boom", "commit"),
    ):
        assert isinstance(err, GroupOrdersError)
        assert isinstance(err.code, ErrorCode)


def test_not_found_is_404():
    err = ResourceNotFoundError("OrdersPack", "abc")
    assert err.http_status == 404
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert "abc" in err.message


def test_database_error_is_503():
    err = DatabaseError("connection refused", "execute")
    assert err.http_status == 503
    assert err.operation == "execute"
