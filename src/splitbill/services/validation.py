"""Checks for the preconditions the calculation functions assume.

The engine itself never validates; callers run these before computing
summaries when the input comes from an untrusted place.
"""

from __future__ import annotations

from typing import Sequence

from splitbill.errors import InvalidReceiptError
from splitbill.models import Receipt
from splitbill.money import to_money


def find_receipt_problems(receipt: Receipt, participant_ids: Sequence[str]) -> list[str]:
    known = set(participant_ids)
    problems: list[str] = []

    if receipt.payer_id not in known:
        problems.append(f"Payer '{receipt.payer_id}' is not a participant")
    if to_money(receipt.tax) < 0:
        problems.append(f"Tax is negative: {receipt.tax}")
    if to_money(receipt.service) < 0:
        problems.append(f"Service is negative: {receipt.service}")

    for item in receipt.items:
        if item.qty <= 0:
            problems.append(f"Item '{item.name}' has non-positive quantity: {item.qty}")
        if to_money(item.total) < 0:
            problems.append(f"Item '{item.name}' has negative price: {item.total}")
        unknown = [participant_id for participant_id in item.assigned_to_ids if participant_id not in known]
        if unknown:
            problems.append(f"Item '{item.name}' is assigned to unknown participants: {', '.join(unknown)}")

    return problems


def validate_receipt(receipt: Receipt, participant_ids: Sequence[str]) -> None:
    problems = find_receipt_problems(receipt, participant_ids)
    if problems:
        raise InvalidReceiptError(problems[0])
