from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from libledger import ItemKind, LedgerSettings, LibrarySystem, PatronKind

T0 = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def system(clock):
    return LibrarySystem(LedgerSettings(enforce_borrow_limit=True), clock=clock)


@pytest.fixture
def stocked(system):
    system.register_item(
        ItemKind.BOOK,
        "B001",
        "The Great Gatsby",
        author="F. Scott Fitzgerald",
        isbn="978-3-16-148410-0",
        genre="Fiction",
    )
    system.register_item(
        ItemKind.MAGAZINE,
        "M001",
        "National Geographic",
        publisher="National Geographic Society",
        issue_number=156,
        publication_date="2023-01-15",
    )
    system.register_item(
        ItemKind.DVD,
        "D001",
        "Inception",
        director="Christopher Nolan",
        duration_minutes=148,
        release_date="2010-07-16",
    )
    system.register_patron(
        PatronKind.STUDENT,
        "S001",
        "Alice Johnson",
        "alice@university.edu",
        student_number="STU123001",
        major="Computer Science",
    )
    system.register_patron(
        PatronKind.FACULTY,
        "F001",
        "Dr. Jane Wilson",
        "jane.wilson@university.edu",
        department="English",
        employee_number="FAC001",
    )
    return system
