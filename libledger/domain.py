"""Catalog items and patrons.

Variants differ only in their policy data (fine rate, loan period, borrow
limit), which is fixed per variant and not passed in by the caller."""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


def linear_fine(days_overdue: int, daily_rate: Decimal) -> Decimal:
    return max(0, days_overdue) * daily_rate


class ItemKind(Enum):
    BOOK = "Book"
    MAGAZINE = "Magazine"
    DVD = "DVD"


class PatronKind(Enum):
    STUDENT = "Student"
    FACULTY = "Faculty"


@dataclass
class CatalogItem:
    """Base for the lendable variants; construct Book, Magazine or DVD."""

    item_id: str
    title: str
    available: bool = field(default=True, init=False)
    daily_fine_rate: Decimal = field(default=Decimal("0.00"), init=False)
    max_loan_days: int = field(default=0, init=False)

    kind = None  # type: ItemKind

    def __post_init__(self) -> None:
        if self.kind is None:
            raise TypeError("CatalogItem is abstract, use Book, Magazine or DVD")

    @property
    def item_type(self) -> str:
        return self.kind.value

    def compute_fine(self, days_overdue: int) -> Decimal:
        return linear_fine(days_overdue, self.daily_fine_rate)

    def describe(self) -> str:
        raise NotImplementedError


@dataclass
class Book(CatalogItem):
    author: str
    isbn: str
    genre: str
    daily_fine_rate: Decimal = field(default=Decimal("0.50"), init=False)
    max_loan_days: int = field(default=21, init=False)

    kind = ItemKind.BOOK

    def describe(self) -> str:
        return f"Author: {self.author}, ISBN: {self.isbn}, Genre: {self.genre}"


@dataclass
class Magazine(CatalogItem):
    publisher: str
    issue_number: int
    publication_date: str
    daily_fine_rate: Decimal = field(default=Decimal("0.25"), init=False)
    max_loan_days: int = field(default=14, init=False)

    kind = ItemKind.MAGAZINE

    def describe(self) -> str:
        return (
            f"Publisher: {self.publisher}, Issue: {self.issue_number}, "
            f"Published: {self.publication_date}"
        )


@dataclass
class DVD(CatalogItem):
    director: str
    duration_minutes: int
    release_date: str
    daily_fine_rate: Decimal = field(default=Decimal("1.00"), init=False)
    max_loan_days: int = field(default=7, init=False)

    kind = ItemKind.DVD

    def describe(self) -> str:
        return (
            f"Director: {self.director}, Duration: {self.duration_minutes} mins, "
            f"Released: {self.release_date}"
        )


@dataclass
class Patron:
    """Base for the borrower variants; construct Student or Faculty."""

    patron_id: str
    name: str
    contact_info: str
    active: bool = field(default=True, init=False)
    max_borrow_items: int = field(default=0, init=False)
    loan_extension_days: int = field(default=0, init=False)  # no renewal yet

    kind = None  # type: PatronKind

    def __post_init__(self) -> None:
        if self.kind is None:
            raise TypeError("Patron is abstract, use Student or Faculty")

    @property
    def patron_type(self) -> str:
        return self.kind.value

    def can_borrow(self) -> bool:
        return self.active

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False


@dataclass
class Student(Patron):
    student_number: str
    major: str
    max_borrow_items: int = field(default=5, init=False)
    loan_extension_days: int = field(default=7, init=False)

    kind = PatronKind.STUDENT


@dataclass
class Faculty(Patron):
    department: str
    employee_number: str
    max_borrow_items: int = field(default=10, init=False)
    loan_extension_days: int = field(default=14, init=False)

    kind = PatronKind.FACULTY


ITEM_CLASSES = {ItemKind.BOOK: Book, ItemKind.MAGAZINE: Magazine, ItemKind.DVD: DVD}
PATRON_CLASSES = {PatronKind.STUDENT: Student, PatronKind.FACULTY: Faculty}
