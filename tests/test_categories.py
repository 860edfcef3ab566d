import pytest

from expense_tracker.categories import (
    CATEGORIES,
    TransactionType,
    get_category,
    list_categories,
    resolve_category,
)
from expense_tracker.errors import CategoryTypeMismatch, ExpenseTrackerError, InvalidInput, UnknownCategory


def test_catalog_has_eleven_unique_categories():
    names = [c.name for c in CATEGORIES]
    assert len(names) == 11
    assert len(set(names)) == 11


def test_list_categories_filters_by_type_and_keeps_order():
    income = [c.name for c in list_categories(TransactionType.INCOME)]
    assert income == ["Salary", "Business", "Investment"]
    expense = [c.name for c in list_categories("expense")]
    assert expense[0] == "Food"
    assert expense[-1] == "Other"
    assert len(expense) == 8


def test_list_categories_without_type_returns_everything():
    assert list_categories() == list(CATEGORIES)


def test_get_category_unknown_name():
    with pytest.raises(UnknownCategory):
        get_category("Groceries")


def test_resolve_category_checks_type():
    assert resolve_category("Salary", TransactionType.INCOME).name == "Salary"
    with pytest.raises(CategoryTypeMismatch):
        resolve_category("Salary", TransactionType.EXPENSE)


def test_transaction_type_parse():
    assert TransactionType.parse("Income") is TransactionType.INCOME
    assert TransactionType.parse(TransactionType.EXPENSE) is TransactionType.EXPENSE
    assert TransactionType.EXPENSE.label == "Expense"
    with pytest.raises(InvalidInput):
        TransactionType.parse("refund")


def test_unknown_type_is_an_expense_tracker_error():
    with pytest.raises(ExpenseTrackerError) as excinfo:
        TransactionType.parse("refund")
    assert "refund" in str(excinfo.value)
