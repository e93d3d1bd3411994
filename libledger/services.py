from __future__ import annotations
from copy import copy
from datetime import datetime
from decimal import Decimal
from typing import Callable, List, Optional, Tuple, Union
import logging
import threading

from .domain import CatalogItem, Book, ItemKind, Patron
from .errors import (
    BorrowLimitExceededError,
    ItemNotFoundError,
    ItemUnavailableError,
    NoActiveCheckoutError,
    PatronNotFoundError,
)
from .repositories import ItemRepo, PatronRepo, TransactionRepo
from .settings import LedgerSettings
from .transactions import Checkout, Return, utcnow

_log = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class CirculationService:
    """The circulation ledger.

    Owns registration, checkout and return. Every mutating call runs under
    one lock, so an item's availability flag and its entry in the active
    checkout index always change together, and history order matches the
    order in which calls completed.
    """

    def __init__(
        self,
        items: ItemRepo,
        patrons: PatronRepo,
        transactions: TransactionRepo,
        settings: LedgerSettings,
        clock: Optional[Clock] = None,
    ) -> None:
        self.items = items
        self.patrons = patrons
        self.transactions = transactions
        self.settings = settings
        self.clock = clock or utcnow
        self.lock = threading.RLock()

    # ---- registration
    def register_item(self, item: CatalogItem) -> None:
        """Register a copy of `item`; the caller keeps no handle on ledger state."""
        if not item.available:
            raise ItemUnavailableError(item.item_id)
        with self.lock:
            self.items.add(copy(item))
        _log.debug(f"Registered {item.item_type} {item.item_id} ('{item.title}')")

    def register_patron(self, patron: Patron) -> None:
        with self.lock:
            self.patrons.add(copy(patron))
        _log.debug(f"Registered {patron.patron_type} {patron.patron_id} ('{patron.name}')")

    def lookup_item(self, item_id: str) -> CatalogItem:
        """Return a detached copy of the item; changing it has no effect on the ledger."""
        with self.lock:
            return copy(self._item(item_id))

    def lookup_patron(self, patron_id: str) -> Patron:
        """Return a detached copy of the patron."""
        with self.lock:
            return copy(self._patron(patron_id))

    def activate_patron(self, patron_id: str) -> None:
        with self.lock:
            self._patron(patron_id).activate()
        _log.info(f"Patron {patron_id} activated")

    def deactivate_patron(self, patron_id: str) -> None:
        with self.lock:
            self._patron(patron_id).deactivate()
        _log.info(f"Patron {patron_id} deactivated")

    def update_contact_info(self, patron_id: str, contact_info: str) -> None:
        with self.lock:
            self._patron(patron_id).contact_info = contact_info

    # ---- circulation
    def checkout(self, item_id: str, patron_id: str) -> Checkout:
        with self.lock:
            item = self._item(item_id)
            patron = self._patron(patron_id)
            now = self.clock()

            if item.available and patron.can_borrow():
                self._check_borrow_limit(patron)

            # Checkout.open raises for unavailable item / inactive patron
            # before touching the item
            checkout = Checkout.open(item, patron, now)
            self.transactions.open_checkout(checkout)
            self.transactions.append(checkout)

        _log.info(
            f"Checked out {item_id} to {patron_id}, due {checkout.formatted_due_date()}"
        )
        return checkout

    def return_item(self, item_id: str) -> Return:
        with self.lock:
            checkout = self.transactions.get_active(item_id)
            if checkout is None:
                _log.debug(f"Return of {item_id} refused: not on loan")
                raise NoActiveCheckoutError(item_id)

            item = self._item(item_id)
            ret = Return.settle(checkout, item, self.clock())
            self.transactions.close_checkout(item_id)
            self.transactions.append(ret)

        if ret.fine:
            _log.info(f"Returned {item_id}, fine due: ${ret.fine:.2f}")
        else:
            _log.info(f"Returned {item_id}")
        return ret

    def get_active_checkout(self, item_id: str) -> Optional[Checkout]:
        with self.lock:
            return self.transactions.get_active(item_id)

    def active_checkouts_for(self, patron_id: str) -> List[Checkout]:
        with self.lock:
            return self.transactions.list_active_by_patron(patron_id)

    # ---- helpers
    def _item(self, item_id: str) -> CatalogItem:
        item = self.items.get(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def _patron(self, patron_id: str) -> Patron:
        patron = self.patrons.get(patron_id)
        if patron is None:
            raise PatronNotFoundError(patron_id)
        return patron

    def _check_borrow_limit(self, patron: Patron) -> None:
        if not self.settings.enforce_borrow_limit:
            return
        on_loan = len(self.transactions.list_active_by_patron(patron.patron_id))
        if on_loan >= patron.max_borrow_items:
            _log.debug(f"Checkout refused: {patron.patron_id} has {on_loan} item(s) on loan")
            raise BorrowLimitExceededError(patron.patron_id, patron.max_borrow_items)


class CatalogService:
    """Read-only searches over the catalog.

    All searches are linear scans in catalog insertion order and match
    substrings case-sensitively. Fine for a branch-sized catalog; a large
    one would need real indexes.
    """

    def __init__(self, items: ItemRepo, lock=None) -> None:
        self.items = items
        # share the ledger lock so scans never race a registration
        self.lock = lock or threading.RLock()

    def search(self, predicate: Callable[[CatalogItem], bool]) -> List[CatalogItem]:
        with self.lock:
            return [copy(i) for i in self.items.filter(predicate)]

    def search_by_title(self, text: str) -> List[CatalogItem]:
        return self.search(lambda i: text in i.title)

    def search_by_author(self, text: str) -> List[CatalogItem]:
        return self.search(lambda i: isinstance(i, Book) and text in i.author)

    def search_by_genre(self, text: str) -> List[CatalogItem]:
        return self.search(lambda i: isinstance(i, Book) and text in i.genre)

    def search_by_type(self, kind: Union[ItemKind, str]) -> List[CatalogItem]:
        if isinstance(kind, ItemKind):
            kind = kind.value
        return self.search(lambda i: i.item_type == kind)

    def inventory(self) -> List[CatalogItem]:
        return self.search(lambda i: True)


class ReportService:
    def __init__(
        self, transactions: TransactionRepo, clock: Optional[Clock] = None, lock=None
    ) -> None:
        self.transactions = transactions
        self.clock = clock or utcnow
        self.lock = lock or threading.RLock()

    def list_overdue(self) -> List[Tuple[Checkout, Decimal]]:
        """Open checkouts past their due date, with the fine owed right now."""
        with self.lock:
            now = self.clock()
            active = self.transactions.list_active()
        return [(c, c.fine(now)) for c in active if c.is_overdue(now)]

    def patron_history(self, patron_id: str) -> List[Checkout]:
        with self.lock:
            return self.transactions.list_checkouts_by_patron(patron_id)
