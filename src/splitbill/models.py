from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Sequence

from splitbill.money import Money, ZERO


@dataclass(frozen=True, slots=True)
class Participant:
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class ReceiptItem:
    id: str
    name: str
    total: Money
    qty: int = 1
    unit_price: Money = ZERO
    assigned_to_ids: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class Receipt:
    id: str
    title: str
    payer_id: str
    items: Sequence[ReceiptItem] = ()
    tax: Money = ZERO
    service: Money = ZERO
    date: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Trip:
    id: str
    name: str
    participants: Sequence[Participant] = ()
    receipts: Sequence[Receipt] = ()

    @property
    def participant_ids(self) -> list[str]:
        return [participant.id for participant in self.participants]


@dataclass(slots=True)
class PersonShare:
    participant_id: str
    subtotal: Decimal
    tax_allocation: Decimal
    service_allocation: Decimal
    total: Decimal


@dataclass(slots=True)
class ItemBreakdown:
    item_id: str
    item_name: str
    qty: int
    item_total: Decimal
    share_amount: Decimal
    shared_with: int


@dataclass(slots=True)
class PersonShareDetail:
    participant_id: str
    subtotal: Decimal
    tax_allocation: Decimal
    service_allocation: Decimal
    total: Decimal
    items: list[ItemBreakdown] = field(default_factory=list)


@dataclass(slots=True)
class SettlementTransfer:
    from_id: str
    to_id: str
    amount: Decimal


@dataclass(slots=True)
class ReceiptSummary:
    receipt_subtotal: Decimal
    grand_total: Decimal
    shares: list[PersonShare]
    balances: dict[str, Decimal]


@dataclass(slots=True)
class TripSummary:
    total_grand_total: Decimal
    aggregate_balances: dict[str, Decimal]
    settlements: list[SettlementTransfer]


@dataclass(slots=True)
class WalletStats:
    participant_id: str
    total_paid: Decimal
    total_consumed: Decimal
    net_balance: Decimal
