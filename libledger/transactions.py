from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional
import uuid

from .domain import CatalogItem, Patron, linear_fine
from .errors import ItemUnavailableError, PatronInactiveError

_HOUR = timedelta(hours=1)


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Transaction:
    transaction_id: str
    timestamp: datetime

    transaction_type = ""

    def formatted_timestamp(self) -> str:
        return self.timestamp.strftime("%Y-%m-%d %H:%M:%S")


@dataclass(frozen=True)
class Checkout(Transaction):
    """An item lent to a patron.

    Records hold IDs only; the ledger resolves them. The item's daily fine
    rate is captured so the record can price itself without a lookup.
    """

    item_id: str
    patron_id: str
    due_at: datetime
    daily_fine_rate: Decimal

    transaction_type = "Checkout"

    @classmethod
    def open(cls, item: CatalogItem, patron: Patron, now: datetime) -> Checkout:
        if not item.available:
            raise ItemUnavailableError(item.item_id)
        if not patron.can_borrow():
            raise PatronInactiveError(patron.patron_id)

        item.available = False
        return cls(
            transaction_id=_new_id("chk"),
            timestamp=now,
            item_id=item.item_id,
            patron_id=patron.patron_id,
            due_at=now + timedelta(hours=24 * item.max_loan_days),
            daily_fine_rate=item.daily_fine_rate,
        )

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        now = now or utcnow()
        return now > self.due_at

    def overdue_days(self, now: Optional[datetime] = None) -> int:
        now = now or utcnow()
        if not self.is_overdue(now):
            return 0
        # whole hours first, then whole days: 25h late is one day
        hours = (now - self.due_at) // _HOUR
        return hours // 24

    def fine(self, now: Optional[datetime] = None) -> Decimal:
        return linear_fine(self.overdue_days(now), self.daily_fine_rate)

    def formatted_due_date(self) -> str:
        return self.due_at.strftime("%Y-%m-%d")

    def details(self, item_title: str, patron_name: str, now: Optional[datetime] = None) -> str:
        return (
            f"Item: {item_title} ({self.item_id})\n"
            f"Patron: {patron_name} ({self.patron_id})\n"
            f"Due Date: {self.formatted_due_date()}\n"
            f"Overdue: {'Yes' if self.is_overdue(now) else 'No'}"
        )


@dataclass(frozen=True)
class Return(Transaction):
    checkout: Checkout
    fine: Decimal = field(default=Decimal("0.00"))

    transaction_type = "Return"

    @classmethod
    def settle(cls, checkout: Checkout, item: CatalogItem, now: datetime) -> Return:
        ret = cls(
            transaction_id=_new_id("ret"),
            timestamp=now,
            checkout=checkout,
            fine=checkout.fine(now),
        )
        item.available = True
        return ret

    @property
    def item_id(self) -> str:
        return self.checkout.item_id

    @property
    def patron_id(self) -> str:
        return self.checkout.patron_id

    def details(self, item_title: str, patron_name: str) -> str:
        return (
            f"Item: {item_title}\n"
            f"Patron: {patron_name}\n"
            f"Returned: {self.formatted_timestamp()}\n"
            f"Fine: ${self.fine:.2f}"
        )
