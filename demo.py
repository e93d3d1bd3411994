from __future__ import annotations
import logging

from libledger import LedgerError, LedgerSettings, LibrarySystem, seed_demo_data


def print_inventory(sys: LibrarySystem) -> None:
    print("\n=== LIBRARY INVENTORY ===")
    for item in sys.report_inventory():
        status = "Available" if item.available else "Checked Out"
        print(f"ID: {item.item_id}")
        print(f"Title: {item.title}")
        print(f"Type: {item.item_type}")
        print(f"Status: {status}")
        print(f"Details: {item.describe()}\n")


def demo_flow() -> None:
    settings = LedgerSettings()
    logging.basicConfig(level=settings.log_level)

    sys = LibrarySystem(settings)
    seed_demo_data(sys)
    print_inventory(sys)

    print("\n[demo] checkouts")
    for item_id, patron_id in [("B001", "S001"), ("D001", "F001"), ("B001", "S002")]:
        try:
            checkout = sys.checkout(item_id, patron_id)
        except LedgerError as e:
            print(f"Error: {e}")
            continue
        item = sys.lookup_item(item_id)
        patron = sys.lookup_patron(patron_id)
        print(f"Checkout successful!\n{checkout.details(item.title, patron.name)}\n")

    print_inventory(sys)

    print("\n[demo] books by 'Orwell':", [i.title for i in sys.search_by_author("Orwell")])
    print("[demo] 'Fiction' items:", [i.title for i in sys.search_by_genre("Fiction")])

    print("\n[demo] returns")
    for item_id in ["B001", "B001"]:
        try:
            ret = sys.return_item(item_id)
        except LedgerError as e:
            print(f"Error: {e}")
            continue
        item = sys.lookup_item(ret.item_id)
        patron = sys.lookup_patron(ret.patron_id)
        print(f"Return successful!\n{ret.details(item.title, patron.name)}\n")

    print("\n=== PATRON HISTORY: S001 ===")
    alice = sys.lookup_patron("S001")
    for checkout in sys.patron_history(alice.patron_id):
        print(checkout.details(sys.lookup_item(checkout.item_id).title, alice.name) + "\n")

    print("\n=== OVERDUE ITEMS ===")
    overdue = sys.list_overdue()
    if not overdue:
        print("No overdue items.")
    for checkout, fine in overdue:
        print(f"Item: {checkout.item_id}, due {checkout.formatted_due_date()}, fine ${fine:.2f}")


if __name__ == "__main__":
    demo_flow()
