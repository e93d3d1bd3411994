"""
libledger: in-memory circulation engine for a lending library.

Exports key modules for convenient imports.
"""

from .domain import (
    ItemKind,
    PatronKind,
    CatalogItem,
    Book,
    Magazine,
    DVD,
    Patron,
    Student,
    Faculty,
)

from .transactions import (
    Transaction,
    Checkout,
    Return,
)

from .errors import (
    LedgerError,
    NotFoundError,
    ItemNotFoundError,
    PatronNotFoundError,
    DuplicateIdError,
    InvalidStateError,
    ItemUnavailableError,
    PatronInactiveError,
    BorrowLimitExceededError,
    NoActiveCheckoutError,
)

from .repositories import (
    ItemRepo,
    PatronRepo,
    TransactionRepo,
)

from .services import (
    CirculationService,
    CatalogService,
    ReportService,
)

from .settings import LedgerSettings
from .api import LibrarySystem
from .seed import seed_demo_data

__all__ = [
    # domain
    "ItemKind",
    "PatronKind",
    "CatalogItem",
    "Book",
    "Magazine",
    "DVD",
    "Patron",
    "Student",
    "Faculty",
    # transactions
    "Transaction",
    "Checkout",
    "Return",
    # errors
    "LedgerError",
    "NotFoundError",
    "ItemNotFoundError",
    "PatronNotFoundError",
    "DuplicateIdError",
    "InvalidStateError",
    "ItemUnavailableError",
    "PatronInactiveError",
    "BorrowLimitExceededError",
    "NoActiveCheckoutError",
    # repos
    "ItemRepo",
    "PatronRepo",
    "TransactionRepo",
    # services
    "CirculationService",
    "CatalogService",
    "ReportService",
    # config
    "LedgerSettings",
    # api
    "LibrarySystem",
    # seed
    "seed_demo_data",
]
