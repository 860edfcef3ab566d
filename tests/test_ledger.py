from datetime import datetime

import pytest

from expense_tracker.categories import TransactionType, get_category
from expense_tracker.errors import CategoryTypeMismatch, InvalidInput, UnknownCategory
from expense_tracker.ledger import FRAME_COLUMNS, LedgerStore


def _sample_ledger():
    ledger = LedgerStore()
    ledger.add(100, "Food", TransactionType.EXPENSE, "Lunch")
    ledger.add(50, "Food", TransactionType.EXPENSE)
    ledger.add(30, "Transport", TransactionType.EXPENSE, "Bus")
    ledger.add(500, "Salary", TransactionType.INCOME, "March pay")
    return ledger


def test_all_returns_insertion_order():
    ledger = _sample_ledger()
    assert [t.amount for t in ledger.all()] == [100.0, 50.0, 30.0, 500.0]
    assert len(ledger) == 4


def test_add_fills_generated_fields():
    ledger = LedgerStore()
    before = datetime.now()
    tx = ledger.add(12.5, get_category("Bills"), "expense", None)
    assert tx.id
    assert tx.category == "Bills"
    assert tx.type is TransactionType.EXPENSE
    assert tx.description == ""
    assert tx.timestamp >= before


def test_add_accepts_explicit_timestamp():
    ledger = LedgerStore()
    when = datetime(2024, 3, 1, 9, 30)
    tx = ledger.add(10, "Other", TransactionType.EXPENSE, timestamp=when)
    assert tx.timestamp == when


def test_add_does_not_validate_amount_sign():
    ledger = LedgerStore()
    assert ledger.add(0, "Other", TransactionType.EXPENSE).amount == 0.0
    assert ledger.add(-5, "Other", TransactionType.EXPENSE).amount == -5.0


def test_add_rejects_unknown_or_mismatched_category():
    ledger = LedgerStore()
    with pytest.raises(UnknownCategory):
        ledger.add(10, "Rent", TransactionType.EXPENSE)
    with pytest.raises(CategoryTypeMismatch):
        ledger.add(10, "Food", TransactionType.INCOME)
    assert len(ledger) == 0


def test_remove_drops_transaction():
    ledger = _sample_ledger()
    target = ledger.all()[1]
    ledger.remove(target.id)
    assert target.id not in [t.id for t in ledger.all()]
    assert ledger.get(target.id) is None
    assert len(ledger) == 3


def test_remove_missing_id_is_noop():
    ledger = _sample_ledger()
    before = ledger.all()
    ledger.remove("does-not-exist")
    assert ledger.all() == before


def test_recent_is_first_five_in_insertion_order():
    ledger = LedgerStore()
    added = [ledger.add(i + 1, "Food", TransactionType.EXPENSE) for i in range(7)]
    assert ledger.recent() == added[:5]
    assert ledger.recent(2) == added[:2]


def test_all_returns_a_copy():
    ledger = _sample_ledger()
    snapshot = ledger.all()
    snapshot.clear()
    assert len(ledger) == 4
    assert ledger.all() == ledger.all()


def test_to_frame_columns_and_rows():
    df = _sample_ledger().to_frame()
    assert list(df.columns) == FRAME_COLUMNS
    assert list(df['Category']) == ["Food", "Food", "Transport", "Salary"]
    assert list(df['Type']) == ["EXPENSE", "EXPENSE", "EXPENSE", "INCOME"]


def test_to_frame_empty_ledger():
    df = LedgerStore().to_frame()
    assert df.empty
    assert list(df.columns) == FRAME_COLUMNS


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf")])
def test_add_rejects_non_finite_amounts(amount):
    ledger = LedgerStore()
    with pytest.raises(InvalidInput):
        ledger.add(amount, "Food", TransactionType.EXPENSE)
    assert len(ledger) == 0
    assert ledger.to_frame()['Amount'].sum() == 0


def test_recent_uses_configured_limit(monkeypatch):
    from expense_tracker import config

    monkeypatch.setattr(config, 'RECENT_TRANSACTIONS_LIMIT', 2)
    ledger = LedgerStore()
    added = [ledger.add(i + 1, "Food", TransactionType.EXPENSE) for i in range(4)]
    assert ledger.recent() == added[:2]
