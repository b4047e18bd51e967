from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from splitbill.config import UnassignedPolicy, resolve_policy
from splitbill.logging import get_logger
from splitbill.models import ItemBreakdown, PersonShare, PersonShareDetail, Receipt, ReceiptSummary
from splitbill.money import ZERO, round2, to_money
from splitbill.services.fees import FeeAllocation, allocate_tax_service
from splitbill.services.split import (
    calculate_person_subtotals,
    calculate_receipt_subtotal,
    effective_assignees,
    split_equally,
)

log = get_logger(__name__)


def calculate_grand_total(receipt: Receipt) -> Decimal:
    receipt_subtotal = calculate_receipt_subtotal(receipt.items)
    return round2(receipt_subtotal + to_money(receipt.tax) + to_money(receipt.service))


def _subtotals_and_fees(
    receipt: Receipt,
    participant_ids: Sequence[str],
    policy: UnassignedPolicy,
) -> tuple[dict[str, Decimal], FeeAllocation]:
    subtotals = calculate_person_subtotals(receipt.items, participant_ids, policy)
    fees = allocate_tax_service(
        subtotals,
        calculate_receipt_subtotal(receipt.items),
        receipt.tax,
        receipt.service,
    )
    return subtotals, fees


def calculate_person_totals(
    receipt: Receipt,
    participant_ids: Sequence[str],
    policy: UnassignedPolicy | None = None,
) -> list[PersonShare]:
    subtotals, fees = _subtotals_and_fees(receipt, participant_ids, resolve_policy(policy))

    shares: list[PersonShare] = []
    for participant_id in participant_ids:
        subtotal = subtotals.get(participant_id, ZERO)
        tax_allocation = fees.tax_allocations.get(participant_id, ZERO)
        service_allocation = fees.service_allocations.get(participant_id, ZERO)
        shares.append(
            PersonShare(
                participant_id=participant_id,
                subtotal=subtotal,
                tax_allocation=tax_allocation,
                service_allocation=service_allocation,
                total=round2(subtotal + tax_allocation + service_allocation),
            )
        )
    return shares


def _balances_from_shares(receipt: Receipt, shares: Sequence[PersonShare], grand_total: Decimal) -> dict[str, Decimal]:
    balances: dict[str, Decimal] = {}
    payer_found = False
    for share in shares:
        if share.participant_id == receipt.payer_id:
            # The payer fronted the whole bill and consumed their own share.
            balances[share.participant_id] = round2(grand_total - share.total)
            payer_found = True
        else:
            balances[share.participant_id] = round2(0 - share.total)

    if not payer_found:
        log.warning("receipt.payer_unknown", receipt_id=receipt.id, payer_id=receipt.payer_id)
    return balances


def calculate_receipt_balances(
    receipt: Receipt,
    participant_ids: Sequence[str],
    policy: UnassignedPolicy | None = None,
) -> dict[str, Decimal]:
    """Positive balance: the participant gets money back. Negative: they pay."""
    shares = calculate_person_totals(receipt, participant_ids, policy)
    return _balances_from_shares(receipt, shares, calculate_grand_total(receipt))


def get_receipt_summary(
    receipt: Receipt,
    participant_ids: Sequence[str],
    policy: UnassignedPolicy | None = None,
) -> ReceiptSummary:
    receipt_subtotal = calculate_receipt_subtotal(receipt.items)
    grand_total = calculate_grand_total(receipt)
    shares = calculate_person_totals(receipt, participant_ids, policy)

    return ReceiptSummary(
        receipt_subtotal=receipt_subtotal,
        grand_total=grand_total,
        shares=shares,
        balances=_balances_from_shares(receipt, shares, grand_total),
    )


def get_person_share_details(
    receipt: Receipt,
    participant_ids: Sequence[str],
    policy: UnassignedPolicy | None = None,
) -> list[PersonShareDetail]:
    """Per-person totals together with the items that make up each subtotal."""
    policy = resolve_policy(policy)
    subtotals, fees = _subtotals_and_fees(receipt, participant_ids, policy)

    details: list[PersonShareDetail] = []
    for participant_id in participant_ids:
        subtotal = subtotals.get(participant_id, ZERO)
        tax_allocation = fees.tax_allocations.get(participant_id, ZERO)
        service_allocation = fees.service_allocations.get(participant_id, ZERO)

        items: list[ItemBreakdown] = []
        for item in receipt.items:
            consumers = effective_assignees(item, participant_ids, policy)
            if participant_id not in consumers:
                continue
            items.append(
                ItemBreakdown(
                    item_id=item.id,
                    item_name=item.name,
                    qty=item.qty,
                    item_total=to_money(item.total),
                    share_amount=split_equally(to_money(item.total), consumers)[participant_id],
                    shared_with=len(consumers),
                )
            )

        details.append(
            PersonShareDetail(
                participant_id=participant_id,
                subtotal=subtotal,
                tax_allocation=tax_allocation,
                service_allocation=service_allocation,
                total=round2(subtotal + tax_allocation + service_allocation),
                items=items,
            )
        )
    return details
