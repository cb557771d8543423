import pytest
from datetime import date, time
from typing import List

from financial_tracker.domain.models import Transaction
from financial_tracker.filters import (
    SearchCriteria,
    by_type,
    by_date_range,
    by_vendor,
    by_custom,
)

@pytest.mark.unit
class TestByType:

    def test_mixed_set(self, make_transaction):
        plus_50 = make_transaction(amount=50.0)
        minus_20 = make_transaction(amount=-20.0)
        zero = make_transaction(amount=0.0)
        transactions = [plus_50, minus_20, zero]

        assert by_type(transactions, deposit=True) == [plus_50]
        assert by_type(transactions, deposit=False) == [minus_20]

    def test_preserves_order(self, sample_transactions: List[Transaction]):
        deposits = by_type(sample_transactions, deposit=True)

        assert [t.description for t in deposits] == ["Salary", "Refund"]

    def test_empty_input(self):
        assert by_type([], deposit=True) == []

@pytest.mark.unit
class TestByDateRange:

    @pytest.fixture
    def around_january(self, make_transaction) -> List[Transaction]:
        return [
            make_transaction(txn_date=date(2025, 2, 1), description="day after end"),
            make_transaction(txn_date=date(2025, 1, 31), description="on end"),
            make_transaction(txn_date=date(2025, 1, 15), description="inside"),
            make_transaction(txn_date=date(2025, 1, 1), description="on start"),
            make_transaction(txn_date=date(2024, 12, 31), description="day before start"),
        ]

    def test_bounds_are_inclusive(self, around_january: List[Transaction]):
        result = by_date_range(around_january, date(2025, 1, 1), date(2025, 1, 31))

        assert [t.description for t in result] == ["on end", "inside", "on start"]

    def test_open_start(self, around_january: List[Transaction]):
        result = by_date_range(around_january, end=date(2025, 1, 1))

        assert [t.description for t in result] == ["on start", "day before start"]

    def test_open_end(self, around_january: List[Transaction]):
        result = by_date_range(around_january, start=date(2025, 1, 31))

        assert [t.description for t in result] == ["day after end", "on end"]

    def test_no_bounds_keeps_everything(self, around_january: List[Transaction]):
        assert by_date_range(around_january) == around_january

@pytest.mark.unit
class TestByVendor:

    def test_case_insensitive_substring(self, make_transaction):
        prime = make_transaction(vendor="Amazon Prime")

        assert by_vendor([prime], "amazon") == [prime]
        assert by_vendor([prime], "PRIME") == [prime]
        assert by_vendor([prime], "zon pr") == [prime]

    def test_no_match(self, sample_transactions: List[Transaction]):
        assert by_vendor(sample_transactions, "walmart") == []

    def test_matches_several(self, sample_transactions: List[Transaction]):
        result = by_vendor(sample_transactions, "Amazon")

        assert [t.vendor for t in result] == ["Amazon Prime", "Amazon"]

@pytest.mark.unit
class TestByCustom:

    @pytest.fixture
    def amounts(self, make_transaction) -> List[Transaction]:
        return [
            make_transaction(amount=50.0, vendor="Amazon"),
            make_transaction(amount=150.0, vendor="Costco"),
            make_transaction(amount=200.0, vendor="Amazon Marketplace"),
        ]

    def test_min_amount_only(self, amounts: List[Transaction]):
        result = by_custom(amounts, SearchCriteria(min_amount=100))

        assert [t.amount for t in result] == [150.0, 200.0]

    def test_min_amount_and_vendor_intersect(self, amounts: List[Transaction]):
        result = by_custom(amounts, SearchCriteria(min_amount=100, vendor="Amazon"))

        assert [t.amount for t in result] == [200.0]

    def test_amount_bounds_are_inclusive(self, amounts: List[Transaction]):
        result = by_custom(amounts, SearchCriteria(min_amount=50, max_amount=150))

        assert [t.amount for t in result] == [50.0, 150.0]

    def test_amount_bounds_compare_signed_amount(self, sample_transactions: List[Transaction]):
        result = by_custom(sample_transactions, SearchCriteria(max_amount=-100))

        assert [t.description for t in result] == ["Groceries"]

    def test_description_is_case_insensitive_substring(self, sample_transactions: List[Transaction]):
        result = by_custom(sample_transactions, SearchCriteria(description="KEYBOARD"))

        assert [t.vendor for t in result] == ["Amazon Prime"]

    def test_date_and_text_criteria_combine(self, sample_transactions: List[Transaction]):
        criteria = SearchCriteria(
            start_date=date(2025, 2, 1),
            end_date=date(2025, 3, 1),
            vendor="amazon",
        )

        result = by_custom(sample_transactions, criteria)

        assert [t.description for t in result] == ["ergonomic keyboard"]

    def test_empty_criteria_match_everything(self, sample_transactions: List[Transaction]):
        criteria = SearchCriteria()

        assert criteria.is_empty
        assert by_custom(sample_transactions, criteria) == sample_transactions

    def test_any_criterion_makes_criteria_non_empty(self):
        assert not SearchCriteria(max_amount=0).is_empty
        assert not SearchCriteria(description="").is_empty

    def test_matches_single_transaction(self):
        txn = Transaction(date(2025, 5, 5), time(8, 0, 0), "Lunch", "Deli", -12.0)

        assert SearchCriteria(vendor="deli", max_amount=0).matches(txn)
        assert not SearchCriteria(vendor="deli", min_amount=0).matches(txn)
