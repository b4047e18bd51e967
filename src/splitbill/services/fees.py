from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping

from splitbill.logging import get_logger
from splitbill.money import Money, ZERO, round2, to_money

log = get_logger(__name__)


@dataclass(slots=True)
class FeeAllocation:
    tax_allocations: dict[str, Decimal]
    service_allocations: dict[str, Decimal]


def _largest_subtotal_id(person_subtotals: Mapping[str, Decimal]) -> str | None:
    largest_id: str | None = None
    largest: Decimal | None = None
    for participant_id, subtotal in person_subtotals.items():
        subtotal = to_money(subtotal)
        # Strict comparison keeps the first participant on ties.
        if largest is None or subtotal > largest:
            largest_id, largest = participant_id, subtotal
    return largest_id


def allocate_proportionally(
    person_subtotals: Mapping[str, Decimal],
    receipt_subtotal: Money,
    amount: Money,
) -> dict[str, Decimal]:
    """Split ``amount`` by each person's share of ``receipt_subtotal``.

    Every allocation is rounded to the cent, then whatever the rounding lost
    or gained is added to the person with the largest subtotal so the
    allocations add up to ``amount`` exactly.
    """
    receipt_subtotal = to_money(receipt_subtotal)
    amount = to_money(amount)

    if receipt_subtotal == 0:
        return {participant_id: ZERO for participant_id in person_subtotals}

    allocations = {
        participant_id: round2(to_money(subtotal) / receipt_subtotal * amount)
        for participant_id, subtotal in person_subtotals.items()
    }

    remainder = round2(amount - sum(allocations.values(), ZERO))
    if remainder != 0:
        largest_id = _largest_subtotal_id(person_subtotals)
        if largest_id is not None:
            allocations[largest_id] = round2(allocations[largest_id] + remainder)
            log.debug("fees.remainder_assigned", participant_id=largest_id, remainder=str(remainder))

    return allocations


def allocate_tax_service(
    person_subtotals: Mapping[str, Decimal],
    receipt_subtotal: Money,
    tax: Money,
    service: Money,
) -> FeeAllocation:
    return FeeAllocation(
        tax_allocations=allocate_proportionally(person_subtotals, receipt_subtotal, tax),
        service_allocations=allocate_proportionally(person_subtotals, receipt_subtotal, service),
    )
