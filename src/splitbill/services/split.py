from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from splitbill.config import UnassignedPolicy, resolve_policy
from splitbill.errors import UnassignedItemError
from splitbill.models import ReceiptItem
from splitbill.money import ZERO, round2, to_money


def split_equally(total: Decimal, consumers: Sequence[str]) -> dict[str, Decimal]:
    """Give every consumer ``total / len(consumers)`` rounded to the cent.

    Rounding leftovers are not redistributed, so the shares may miss the
    total by a few cents.
    """
    if not consumers:
        return {}
    share = round2(to_money(total) / len(consumers))
    return {consumer: share for consumer in consumers}


def calculate_item_shares(item: ReceiptItem) -> dict[str, Decimal]:
    return split_equally(to_money(item.total), item.assigned_to_ids)


def effective_assignees(
    item: ReceiptItem,
    participant_ids: Sequence[str],
    policy: UnassignedPolicy,
) -> Sequence[str]:
    if item.assigned_to_ids:
        return item.assigned_to_ids
    if policy == UnassignedPolicy.SPLIT_EVENLY:
        return participant_ids
    if policy == UnassignedPolicy.REJECT:
        raise UnassignedItemError([item.id])
    return ()


def ensure_assigned(items: Iterable[ReceiptItem]) -> None:
    unassigned = [item.id for item in items if not item.assigned_to_ids]
    if unassigned:
        raise UnassignedItemError(unassigned)


def calculate_person_subtotals(
    items: Sequence[ReceiptItem],
    participant_ids: Sequence[str],
    policy: UnassignedPolicy | None = None,
) -> dict[str, Decimal]:
    policy = resolve_policy(policy)
    if policy == UnassignedPolicy.REJECT:
        ensure_assigned(items)

    subtotals: dict[str, Decimal] = {participant_id: ZERO for participant_id in participant_ids}

    for item in items:
        consumers = effective_assignees(item, participant_ids, policy)
        for participant_id, share in split_equally(to_money(item.total), consumers).items():
            # Shares for people outside the queried set are dropped.
            if participant_id in subtotals:
                subtotals[participant_id] = round2(subtotals[participant_id] + share)

    return subtotals


def calculate_receipt_subtotal(items: Iterable[ReceiptItem]) -> Decimal:
    return round2(sum((to_money(item.total) for item in items), ZERO))
