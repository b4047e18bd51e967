from __future__ import annotations

from typing import Sequence


class SplitBillError(ValueError):
    pass


class InvalidReceiptError(SplitBillError):
    pass


class UnassignedItemError(InvalidReceiptError):
    def __init__(self, item_ids: Sequence[str]) -> None:
        self.item_ids = list(item_ids)
        super().__init__(f"Items without assignees: {', '.join(self.item_ids)}")
