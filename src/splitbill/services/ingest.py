from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from typing import Optional, Protocol

from splitbill.errors import InvalidReceiptError
from splitbill.models import Receipt, ReceiptItem
from splitbill.money import Money, ZERO, round2


@dataclass(slots=True)
class ExtractedItem:
    name: str
    total_price: Money
    qty: int = 1


@dataclass(slots=True)
class ExtractedReceipt:
    items: list[ExtractedItem] = field(default_factory=list)
    tax: Money = ZERO
    service: Money = ZERO


class ReceiptSource(Protocol):
    """Anything that turns raw receipt input (text, an image, ...) into items."""

    def extract(self, raw: object) -> ExtractedReceipt: ...


def generate_id() -> str:
    return secrets.token_hex(5)


def build_receipt(
    extracted: ExtractedReceipt,
    *,
    payer_id: str,
    title: str,
    receipt_id: Optional[str] = None,
    date: Optional[str] = None,
) -> Receipt:
    """Build an unassigned :class:`Receipt` from a source's extraction result.

    ``total_price`` is the line total, so the unit price is derived from it
    rather than the other way round.
    """
    items: list[ReceiptItem] = []
    for extracted_item in extracted.items:
        if extracted_item.qty < 1:
            raise InvalidReceiptError(f"Item '{extracted_item.name}' has non-positive quantity: {extracted_item.qty}")
        total = round2(extracted_item.total_price)
        if total < 0:
            raise InvalidReceiptError(f"Item '{extracted_item.name}' has negative price: {total}")
        items.append(
            ReceiptItem(
                id=generate_id(),
                name=extracted_item.name.strip(),
                qty=extracted_item.qty,
                unit_price=round2(total / extracted_item.qty),
                total=total,
            )
        )

    tax = round2(extracted.tax)
    service = round2(extracted.service)
    if tax < 0 or service < 0:
        raise InvalidReceiptError("Tax and service must be non-negative")

    return Receipt(
        id=receipt_id or generate_id(),
        title=title,
        date=date,
        payer_id=payer_id,
        items=tuple(items),
        tax=tax,
        service=service,
    )


def extract_receipt(
    source: ReceiptSource,
    raw: object,
    *,
    payer_id: str,
    title: str,
    receipt_id: Optional[str] = None,
    date: Optional[str] = None,
) -> Receipt:
    return build_receipt(
        source.extract(raw),
        payer_id=payer_id,
        title=title,
        receipt_id=receipt_id,
        date=date,
    )
