class LedgerError(Exception):
    """Base exception."""


# *** lookup errors ***


class NotFoundError(LedgerError):
    """Raised when an ID is not registered."""


class ItemNotFoundError(NotFoundError):
    """Raised when no catalog item is registered under the given ID."""

    def __init__(self, item_id: str):
        super().__init__(f"Item not found: {item_id}")
        self.item_id = item_id


class PatronNotFoundError(NotFoundError):
    """Raised when no patron is registered under the given ID."""

    def __init__(self, patron_id: str):
        super().__init__(f"Patron not found: {patron_id}")
        self.patron_id = patron_id


# *** registration errors ***


class DuplicateIdError(LedgerError):
    """Raised when registering an item or patron under an ID already in use.

    Args:
        kind    Namespace of the clash, either "item" or "patron"
        id_     The ID that is already registered
    """

    def __init__(self, kind: str, id_: str):
        super().__init__(f"Duplicate {kind} id: {id_}")
        self.kind = kind
        self.id = id_


# *** state errors ***


class InvalidStateError(LedgerError):
    """Raised when an operation is not allowed in the current state."""


class ItemUnavailableError(InvalidStateError):
    """Raised when checking out an item that is already on loan."""

    def __init__(self, item_id: str):
        super().__init__(f"Checkout failed: item is not available: {item_id}")
        self.item_id = item_id


class PatronInactiveError(InvalidStateError):
    """Raised when an inactive patron tries to borrow."""

    def __init__(self, patron_id: str):
        super().__init__(f"Checkout failed: patron is not active: {patron_id}")
        self.patron_id = patron_id


class BorrowLimitExceededError(InvalidStateError):
    """Raised when a patron already holds as many items as their policy allows."""

    def __init__(self, patron_id: str, limit: int):
        super().__init__(
            f"Checkout failed: patron {patron_id} already has {limit} item(s) on loan"
        )
        self.patron_id = patron_id
        self.limit = limit


class NoActiveCheckoutError(InvalidStateError):
    """Raised when returning an item that is not on loan."""

    def __init__(self, item_id: str):
        super().__init__(f"Return failed: no active checkout for item: {item_id}")
        self.item_id = item_id
