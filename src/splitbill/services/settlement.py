from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Mapping

from splitbill.logging import get_logger
from splitbill.models import SettlementTransfer
from splitbill.money import SETTLEMENT_EPSILON, round2, to_money

log = get_logger(__name__)


def minimize_transactions(balances: Mapping[str, Decimal]) -> list[SettlementTransfer]:
    """Greedy largest-debtor to largest-creditor settlement.

    Balances within one cent of zero are treated as settled. Produces at most
    ``n - 1`` transfers for ``n`` participants, though not always the
    theoretical minimum.
    """
    creditors: list[tuple[str, Decimal]] = []
    debtors: list[tuple[str, Decimal]] = []

    for participant_id, balance in balances.items():
        balance = to_money(balance)
        if balance < -SETTLEMENT_EPSILON:
            debtors.append((participant_id, -balance))
        elif balance > SETTLEMENT_EPSILON:
            creditors.append((participant_id, balance))

    creditors.sort(key=lambda x: x[1], reverse=True)
    debtors.sort(key=lambda x: x[1], reverse=True)

    transfers: list[SettlementTransfer] = []
    i, j = 0, 0

    while i < len(creditors) and j < len(debtors):
        cred_id, cred_amount = creditors[i]
        debt_id, debt_amount = debtors[j]

        amount = round2(min(debt_amount, cred_amount))
        if amount > SETTLEMENT_EPSILON:
            transfers.append(SettlementTransfer(from_id=debt_id, to_id=cred_id, amount=amount))

        cred_amount = round2(cred_amount - amount)
        debt_amount = round2(debt_amount - amount)

        if cred_amount < SETTLEMENT_EPSILON:
            i += 1
        else:
            creditors[i] = (cred_id, cred_amount)

        if debt_amount < SETTLEMENT_EPSILON:
            j += 1
        else:
            debtors[j] = (debt_id, debt_amount)

    log.debug(
        "settlement.computed",
        participants=len(balances),
        transfers=len(transfers),
        unsettled_creditors=len(creditors) - i,
        unsettled_debtors=len(debtors) - j,
    )
    return transfers


def apply_transfers(
    balances: Mapping[str, Decimal],
    transfers: Iterable[SettlementTransfer],
) -> dict[str, Decimal]:
    """Return the balances left after every transfer has been paid."""
    after = {participant_id: round2(balance) for participant_id, balance in balances.items()}
    for transfer in transfers:
        after[transfer.from_id] = round2(after.get(transfer.from_id, 0) + transfer.amount)
        after[transfer.to_id] = round2(after.get(transfer.to_id, 0) - transfer.amount)
    return after
