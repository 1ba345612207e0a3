# ledger_view/tests/unit/test_query_filter.py

import pytest
from decimal import Decimal

from ledger_view.core.models.transaction import Transaction
from ledger_view.logic.projections import searchable_projections
from ledger_view.logic.query_filter import QueryFilter

@pytest.fixture
def query_filter():
    """Provides a QueryFilter instance for tests."""
    return QueryFilter()

@pytest.fixture
def mock_transactions():
    return [
        Transaction(id=1, date="01-01-2025", remark="Salary January", amount=Decimal("3000"), currency="USD", type="Credit"),
        Transaction(id=2, date="02-01-2025", remark="Groceries", amount=Decimal("-150.75"), currency="EUR", type="Debit"),
        Transaction(id=3, date="15-03-2025", remark="", amount=Decimal("-50"), currency="USD", type="Debit"),
        Transaction(id=4, date="20-11-2024", remark="Credit card cashback", amount=Decimal("12.5"), currency="GBP", type="Credit"),
    ]

def ids(transactions):
    return [txn.id for txn in transactions]

def test_empty_query_returns_same_list(query_filter, mock_transactions):
    """An empty query must hand back the input list itself, not a copy."""
    assert query_filter.filter_transactions(mock_transactions, "") is mock_transactions

@pytest.mark.parametrize("query", ["   ", "\t", "\n  "])
def test_whitespace_query_returns_same_list(query_filter, mock_transactions, query):
    assert query_filter.filter_transactions(mock_transactions, query) is mock_transactions

def test_empty_collection(query_filter):
    assert query_filter.filter_transactions([], "salary") == []

def test_matches_remark_case_insensitively(query_filter, mock_transactions):
    assert ids(query_filter.filter_transactions(mock_transactions, "GROCER")) == [2]

def test_query_is_trimmed(query_filter, mock_transactions):
    assert ids(query_filter.filter_transactions(mock_transactions, "  salary  ")) == [1]

def test_matches_type(query_filter, mock_transactions):
    # Transaction 4 matches through its type and its remark; order is the input order
    assert ids(query_filter.filter_transactions(mock_transactions, "credit")) == [1, 4]
    assert ids(query_filter.filter_transactions(mock_transactions, "debit")) == [2, 3]

def test_matches_currency(query_filter, mock_transactions):
    assert ids(query_filter.filter_transactions(mock_transactions, "usd")) == [1, 3]

def test_matches_partial_and_signed_amounts(query_filter, mock_transactions):
    assert ids(query_filter.filter_transactions(mock_transactions, "-150.7")) == [2]
    assert ids(query_filter.filter_transactions(mock_transactions, "12.5")) == [4]
    # "-150.75" does not contain "-50"
    assert ids(query_filter.filter_transactions(mock_transactions, "-50")) == [3]

def test_matches_raw_stored_date(query_filter, mock_transactions):
    assert ids(query_filter.filter_transactions(mock_transactions, "15-03")) == [3]

def test_matches_short_date_form(query_filter, mock_transactions):
    assert ids(query_filter.filter_transactions(mock_transactions, "3/15/2025")) == [3]
    assert ids(query_filter.filter_transactions(mock_transactions, "11/20")) == [4]

def test_matches_long_date_form_with_punctuation(query_filter, mock_transactions):
    assert ids(query_filter.filter_transactions(mock_transactions, "Jan 2, 2025")) == [2]
    assert ids(query_filter.filter_transactions(mock_transactions, "nov")) == [4]
    assert ids(query_filter.filter_transactions(mock_transactions, ", 2024")) == [4]

def test_no_match_returns_empty_list(query_filter, mock_transactions):
    assert query_filter.filter_transactions(mock_transactions, "zzz") == []

def test_filter_does_not_modify_input(query_filter, mock_transactions):
    before = list(mock_transactions)
    query_filter.filter_transactions(mock_transactions, "usd")
    assert mock_transactions == before

@pytest.mark.parametrize("query", ["a", "1", "-", "2025", "usd", "jan", "/", "ry"])
def test_inclusion_and_completeness(query_filter, mock_transactions, query):
    """Every returned transaction has a matching projection and every left-out one has none."""
    result = query_filter.filter_transactions(mock_transactions, query)
    needle = query.strip().lower()
    for txn in mock_transactions:
        matches = any(needle in projection for projection in searchable_projections(txn))
        assert (txn in result) == matches

def test_order_is_preserved(query_filter, mock_transactions):
    shuffled = [mock_transactions[3], mock_transactions[0], mock_transactions[2], mock_transactions[1]]
    assert ids(query_filter.filter_transactions(shuffled, "2025")) == [1, 3, 2]

def test_example_scenario(query_filter):
    all_txns = [
        Transaction(id=1, date="01-01-2025", amount=100, currency="USD", type="Credit"),
        Transaction(id=2, date="02-01-2025", amount=-50, currency="USD", type="Debit"),
    ]
    assert ids(query_filter.filter_transactions(all_txns, "credit")) == [1]
    assert query_filter.filter_transactions(all_txns, "") is all_txns
    assert query_filter.filter_transactions(all_txns, "zzz") == []
