from __future__ import annotations
import logging

from .api import LibrarySystem
from .domain import ItemKind, PatronKind

_log = logging.getLogger(__name__)


def seed_demo_data(sys: LibrarySystem) -> None:
    # books
    sys.register_item(
        ItemKind.BOOK,
        "B001",
        "The Great Gatsby",
        author="F. Scott Fitzgerald",
        isbn="978-3-16-148410-0",
        genre="Fiction",
    )
    sys.register_item(
        ItemKind.BOOK,
        "B002",
        "1984",
        author="George Orwell",
        isbn="978-0451524935",
        genre="Dystopian",
    )
    sys.register_item(
        ItemKind.BOOK,
        "B003",
        "To Kill a Mockingbird",
        author="Harper Lee",
        isbn="978-0061120084",
        genre="Fiction",
    )

    # magazines
    sys.register_item(
        ItemKind.MAGAZINE,
        "M001",
        "National Geographic",
        publisher="National Geographic Society",
        issue_number=156,
        publication_date="2023-01-15",
    )

    # dvds
    sys.register_item(
        ItemKind.DVD,
        "D001",
        "Inception",
        director="Christopher Nolan",
        duration_minutes=148,
        release_date="2010-07-16",
    )

    # patrons
    sys.register_patron(
        PatronKind.STUDENT,
        "S001",
        "Alice Johnson",
        "alice@university.edu",
        student_number="STU123001",
        major="Computer Science",
    )
    sys.register_patron(
        PatronKind.STUDENT,
        "S002",
        "Bob Smith",
        "bob@university.edu",
        student_number="STU123002",
        major="Literature",
    )
    sys.register_patron(
        PatronKind.FACULTY,
        "F001",
        "Dr. Jane Wilson",
        "jane.wilson@university.edu",
        department="English",
        employee_number="FAC001",
    )

    _log.info(
        f"Seeded {len(sys.items.list_all())} items and {len(sys.patrons.list_all())} patrons"
    )
