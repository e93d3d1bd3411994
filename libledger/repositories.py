from __future__ import annotations
from typing import Callable, Dict, List, Optional

from .domain import CatalogItem, Patron
from .errors import DuplicateIdError
from .transactions import Checkout, Transaction


class ItemRepo:
    def __init__(self) -> None:
        self._items: Dict[str, CatalogItem] = {}

    def add(self, item: CatalogItem) -> None:
        if item.item_id in self._items:
            raise DuplicateIdError("item", item.item_id)
        self._items[item.item_id] = item

    def get(self, item_id: str) -> Optional[CatalogItem]:
        return self._items.get(item_id)

    def list_all(self) -> List[CatalogItem]:
        # insertion order
        return list(self._items.values())

    def filter(self, predicate: Callable[[CatalogItem], bool]) -> List[CatalogItem]:
        return [i for i in self._items.values() if predicate(i)]


class PatronRepo:
    def __init__(self) -> None:
        self._patrons: Dict[str, Patron] = {}

    def add(self, patron: Patron) -> None:
        if patron.patron_id in self._patrons:
            raise DuplicateIdError("patron", patron.patron_id)
        self._patrons[patron.patron_id] = patron

    def get(self, patron_id: str) -> Optional[Patron]:
        return self._patrons.get(patron_id)

    def list_all(self) -> List[Patron]:
        return list(self._patrons.values())


class TransactionRepo:
    """Append-only history plus the index of open checkouts keyed by item ID."""

    def __init__(self) -> None:
        self._history: List[Transaction] = []
        self._active: Dict[str, Checkout] = {}

    def append(self, txn: Transaction) -> None:
        self._history.append(txn)

    def history(self) -> List[Transaction]:
        return list(self._history)

    def open_checkout(self, checkout: Checkout) -> None:
        self._active[checkout.item_id] = checkout

    def close_checkout(self, item_id: str) -> None:
        del self._active[item_id]

    def get_active(self, item_id: str) -> Optional[Checkout]:
        return self._active.get(item_id)

    def list_active(self) -> List[Checkout]:
        return list(self._active.values())

    def list_active_by_patron(self, patron_id: str) -> List[Checkout]:
        return [c for c in self._active.values() if c.patron_id == patron_id]

    def list_checkouts_by_patron(self, patron_id: str) -> List[Checkout]:
        return [
            t
            for t in self._history
            if isinstance(t, Checkout) and t.patron_id == patron_id
        ]
