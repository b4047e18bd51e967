from __future__ import annotations

from decimal import Decimal

from splitbill.config import UnassignedPolicy, resolve_policy
from splitbill.logging import get_logger
from splitbill.models import Trip, TripSummary, WalletStats
from splitbill.money import ZERO, round2
from splitbill.services.receipt import get_receipt_summary
from splitbill.services.settlement import minimize_transactions

log = get_logger(__name__)


def get_trip_summary(trip: Trip, policy: UnassignedPolicy | None = None) -> TripSummary:
    policy = resolve_policy(policy)
    participant_ids = trip.participant_ids
    aggregate_balances: dict[str, Decimal] = {participant_id: ZERO for participant_id in participant_ids}
    total_grand_total = ZERO

    for receipt in trip.receipts:
        summary = get_receipt_summary(receipt, participant_ids, policy)
        total_grand_total += summary.grand_total
        for participant_id, balance in summary.balances.items():
            aggregate_balances[participant_id] = round2(aggregate_balances[participant_id] + balance)

    settlements = minimize_transactions(aggregate_balances)
    log.debug(
        "trip.aggregated",
        trip_id=trip.id,
        receipts=len(trip.receipts),
        settlements=len(settlements),
    )

    return TripSummary(
        total_grand_total=round2(total_grand_total),
        aggregate_balances=aggregate_balances,
        settlements=settlements,
    )


def get_wallet_stats(trip: Trip, policy: UnassignedPolicy | None = None) -> list[WalletStats]:
    """Money each participant paid out as payer versus money they consumed."""
    policy = resolve_policy(policy)
    participant_ids = trip.participant_ids
    paid: dict[str, Decimal] = {participant_id: ZERO for participant_id in participant_ids}
    consumed: dict[str, Decimal] = {participant_id: ZERO for participant_id in participant_ids}

    for receipt in trip.receipts:
        summary = get_receipt_summary(receipt, participant_ids, policy)
        if receipt.payer_id in paid:
            paid[receipt.payer_id] = round2(paid[receipt.payer_id] + summary.grand_total)
        for share in summary.shares:
            consumed[share.participant_id] = round2(consumed[share.participant_id] + share.total)

    return [
        WalletStats(
            participant_id=participant_id,
            total_paid=paid[participant_id],
            total_consumed=consumed[participant_id],
            net_balance=round2(paid[participant_id] - consumed[participant_id]),
        )
        for participant_id in participant_ids
    ]
