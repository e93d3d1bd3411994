from __future__ import annotations
from decimal import Decimal
from typing import Any, Callable, List, Optional, Tuple, Union

from .domain import (
    CatalogItem,
    ItemKind,
    ITEM_CLASSES,
    Patron,
    PatronKind,
    PATRON_CLASSES,
)
from .repositories import ItemRepo, PatronRepo, TransactionRepo
from .services import CatalogService, CirculationService, Clock, ReportService
from .settings import LedgerSettings
from .transactions import Checkout, Return, Transaction


class LibrarySystem:
    """
    A simple facade that wires repos + services and offers a compact API.

    This is the surface a presentation layer (menu, web handler, ...) talks
    to. Every failure is raised as a ``LedgerError`` subclass.
    """

    def __init__(
        self, settings: Optional[LedgerSettings] = None, clock: Optional[Clock] = None
    ) -> None:
        self.settings = settings or LedgerSettings()

        # repos
        self.items = ItemRepo()
        self.patrons = PatronRepo()
        self.transactions = TransactionRepo()

        # services
        self.circulation = CirculationService(
            self.items, self.patrons, self.transactions, self.settings, clock
        )
        self.catalog = CatalogService(self.items, self.circulation.lock)
        self.reports = ReportService(
            self.transactions, self.circulation.clock, self.circulation.lock
        )

    # ---- registration
    def register_item(
        self, kind: Union[ItemKind, str], item_id: str, title: str, **fields: Any
    ) -> CatalogItem:
        """Create and register an item, e.g.

        register_item(ItemKind.BOOK, "B001", "1984", author="George Orwell",
                      isbn="978-0451524935", genre="Dystopian")
        """
        cls = ITEM_CLASSES[ItemKind(kind)]
        item = cls(item_id=item_id, title=title, **fields)
        self.circulation.register_item(item)
        return self.circulation.lookup_item(item_id)

    def register_patron(
        self,
        kind: Union[PatronKind, str],
        patron_id: str,
        name: str,
        contact_info: str,
        **fields: Any,
    ) -> Patron:
        cls = PATRON_CLASSES[PatronKind(kind)]
        patron = cls(patron_id=patron_id, name=name, contact_info=contact_info, **fields)
        self.circulation.register_patron(patron)
        return self.circulation.lookup_patron(patron_id)

    def lookup_item(self, item_id: str) -> CatalogItem:
        return self.circulation.lookup_item(item_id)

    def lookup_patron(self, patron_id: str) -> Patron:
        return self.circulation.lookup_patron(patron_id)

    def activate_patron(self, patron_id: str) -> None:
        self.circulation.activate_patron(patron_id)

    def deactivate_patron(self, patron_id: str) -> None:
        self.circulation.deactivate_patron(patron_id)

    def update_contact_info(self, patron_id: str, contact_info: str) -> None:
        self.circulation.update_contact_info(patron_id, contact_info)

    # ---- circulation
    def checkout(self, item_id: str, patron_id: str) -> Checkout:
        return self.circulation.checkout(item_id, patron_id)

    def return_item(self, item_id: str) -> Return:
        return self.circulation.return_item(item_id)

    # ---- search
    def search_by_title(self, text: str) -> List[CatalogItem]:
        return self.catalog.search_by_title(text)

    def search_by_author(self, text: str) -> List[CatalogItem]:
        return self.catalog.search_by_author(text)

    def search_by_genre(self, text: str) -> List[CatalogItem]:
        return self.catalog.search_by_genre(text)

    def search_by_type(self, kind: Union[ItemKind, str]) -> List[CatalogItem]:
        return self.catalog.search_by_type(kind)

    def search(self, predicate: Callable[[CatalogItem], bool]) -> List[CatalogItem]:
        return self.catalog.search(predicate)

    # ---- reporting
    def list_overdue(self) -> List[Tuple[Checkout, Decimal]]:
        return self.reports.list_overdue()

    def patron_history(self, patron_id: str) -> List[Checkout]:
        return self.reports.patron_history(patron_id)

    def report_inventory(self) -> List[CatalogItem]:
        return self.catalog.inventory()

    def history(self) -> List[Transaction]:
        with self.circulation.lock:
            return self.transactions.history()
