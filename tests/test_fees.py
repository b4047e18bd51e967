from decimal import Decimal

from splitbill.services.fees import allocate_proportionally, allocate_tax_service


def test_tax_proportional_to_subtotal():
    subtotals = {"a": Decimal("60"), "b": Decimal("40")}
    allocation = allocate_tax_service(subtotals, 100, 10, 0)
    assert allocation.tax_allocations == {"a": 6, "b": 4}
    assert allocation.service_allocations == {"a": 0, "b": 0}


def test_remainder_goes_to_largest_subtotal():
    subtotals = {"a": Decimal("33.33"), "b": Decimal("33.33"), "c": Decimal("33.34")}
    tax = allocate_proportionally(subtotals, 100, 10)
    assert sum(tax.values()) == Decimal("10")
    assert tax == {"a": Decimal("3.33"), "b": Decimal("3.33"), "c": Decimal("3.34")}


def test_remainder_tie_goes_to_first_found():
    subtotals = {"a": Decimal("10"), "b": Decimal("10"), "c": Decimal("10")}
    service = allocate_proportionally(subtotals, 30, 1)
    assert service == {"a": Decimal("0.34"), "b": Decimal("0.33"), "c": Decimal("0.33")}


def test_negative_remainder_is_taken_back():
    subtotals = {"a": Decimal("1"), "b": Decimal("1"), "c": Decimal("1")}
    tax = allocate_proportionally(subtotals, 3, 2)
    # each raw allocation rounds up to 0.67
    assert tax == {"a": Decimal("0.66"), "b": Decimal("0.67"), "c": Decimal("0.67")}
    assert sum(tax.values()) == 2


def test_zero_subtotal_allocates_nothing():
    subtotals = {"a": Decimal("0"), "b": Decimal("0")}
    allocation = allocate_tax_service(subtotals, 0, 5, 3)
    assert allocation.tax_allocations == {"a": 0, "b": 0}
    assert allocation.service_allocations == {"a": 0, "b": 0}


def test_tax_and_service_corrected_independently():
    subtotals = {"a": Decimal("20"), "b": Decimal("10")}
    allocation = allocate_tax_service(subtotals, 30, "1.00", "2.00")
    assert sum(allocation.tax_allocations.values()) == Decimal("1.00")
    assert sum(allocation.service_allocations.values()) == Decimal("2.00")
    assert allocation.tax_allocations == {"a": Decimal("0.67"), "b": Decimal("0.33")}
    assert allocation.service_allocations == {"a": Decimal("1.33"), "b": Decimal("0.67")}


def test_string_subtotals_compared_as_amounts():
    subtotals = {"a": "9", "b": "10", "c": "10"}
    tax = allocate_proportionally(subtotals, 29, 1)
    assert tax == {"a": Decimal("0.31"), "b": Decimal("0.35"), "c": Decimal("0.34")}
