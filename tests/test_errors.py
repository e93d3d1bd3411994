import pytest

from libledger.errors import (
    BorrowLimitExceededError,
    DuplicateIdError,
    InvalidStateError,
    ItemNotFoundError,
    ItemUnavailableError,
    LedgerError,
    NoActiveCheckoutError,
    NotFoundError,
    PatronInactiveError,
    PatronNotFoundError,
)


def test_item_not_found_error():
    with pytest.raises(NotFoundError) as e:
        raise ItemNotFoundError("B404")
    assert str(e.value) == "Item not found: B404"
    assert e.value.item_id == "B404"


def test_hierarchy():
    assert issubclass(PatronNotFoundError, NotFoundError)
    assert issubclass(DuplicateIdError, LedgerError)
    for cls in (
        ItemUnavailableError,
        PatronInactiveError,
        NoActiveCheckoutError,
        BorrowLimitExceededError,
    ):
        assert issubclass(cls, InvalidStateError)
        assert issubclass(cls, LedgerError)


def test_borrow_limit_error_attributes():
    err = BorrowLimitExceededError("S001", 5)
    assert err.patron_id == "S001"
    assert err.limit == 5
    assert "already has 5 item(s)" in str(err)
