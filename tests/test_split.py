from decimal import Decimal

import pytest

from splitbill.config import UnassignedPolicy
from splitbill.errors import UnassignedItemError
from splitbill.models import ReceiptItem
from splitbill.services.split import calculate_item_shares, calculate_person_subtotals, calculate_receipt_subtotal


def test_item_shares_even():
    item = ReceiptItem(id="i1", name="Pizza", total=30, assigned_to_ids=["a", "b", "c"])
    assert calculate_item_shares(item) == {"a": 10, "b": 10, "c": 10}


def test_item_shares_rounded_without_correction():
    item = ReceiptItem(id="i1", name="Soup", total="10", assigned_to_ids=["a", "b", "c"])
    shares = calculate_item_shares(item)
    assert set(shares.values()) == {Decimal("3.33")}


def test_item_shares_unassigned_is_empty():
    item = ReceiptItem(id="i1", name="Water", total=5)
    assert calculate_item_shares(item) == {}


def test_subtotals_include_every_participant():
    items = [
        ReceiptItem(id="i1", name="Tea", total="4.50", assigned_to_ids=["a"]),
        ReceiptItem(id="i2", name="Cake", total=12, assigned_to_ids=["a", "b"]),
    ]
    subtotals = calculate_person_subtotals(items, ["a", "b", "c"])
    assert subtotals == {"a": Decimal("10.50"), "b": Decimal("6.00"), "c": Decimal("0")}
    assert list(subtotals) == ["a", "b", "c"]


def test_subtotals_ignore_participants_outside_scope():
    items = [ReceiptItem(id="i1", name="Tea", total=10, assigned_to_ids=["a", "z"])]
    assert calculate_person_subtotals(items, ["a"]) == {"a": Decimal("5.00")}


def test_unassigned_item_excluded():
    items = [
        ReceiptItem(id="i1", name="Tea", total=10, assigned_to_ids=["a"]),
        ReceiptItem(id="i2", name="Bread", total=6),
    ]
    subtotals = calculate_person_subtotals(items, ["a", "b"], UnassignedPolicy.EXCLUDE)
    assert subtotals == {"a": Decimal("10"), "b": Decimal("0")}
    assert calculate_receipt_subtotal(items) == Decimal("16.00")


def test_unassigned_item_split_evenly_by_default():
    items = [
        ReceiptItem(id="i1", name="Tea", total=10, assigned_to_ids=["a"]),
        ReceiptItem(id="i2", name="Bread", total=6),
    ]
    subtotals = calculate_person_subtotals(items, ["a", "b"])
    assert subtotals == {"a": Decimal("13"), "b": Decimal("3")}


def test_unassigned_item_rejected():
    items = [
        ReceiptItem(id="i1", name="Tea", total=10),
        ReceiptItem(id="i2", name="Bread", total=6),
    ]
    with pytest.raises(UnassignedItemError) as exc_info:
        calculate_person_subtotals(items, ["a", "b"], UnassignedPolicy.REJECT)
    assert exc_info.value.item_ids == ["i1", "i2"]
