"""Ledger analytics.

Totals, balance and per-category expense breakdowns derived from a
:class:`~expense_tracker.ledger.LedgerStore`.  Nothing is cached: every
call takes a fresh snapshot of the ledger, so values always reflect the
latest adds and removes.

Totals go through pandas ``Series.sum``, which adds floats pairwise rather
than left to right.  Ten expenses of 0.1 therefore total exactly 1.0, where
a running ``sum()`` over the amounts gives 0.9999999999999999.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Tuple

import pandas as pd

from .categories import TransactionType, get_category
from .ledger import LedgerStore

BREAKDOWN_COLUMNS = ["Category", "Amount", "Percentage", "Color"]


def percentage_of_total(category_amount: float, total_expense: float) -> int:
    """Share of ``total_expense`` as a whole percentage, rounded half up.

    Returns 0 when the total is zero instead of dividing by it.
    """
    if not total_expense:
        return 0
    return int(math.floor(category_amount / total_expense * 100 + 0.5))


class LedgerAnalytics:
    """Derived figures over a ledger."""

    def __init__(self, ledger: LedgerStore):
        self.ledger = ledger

    def _rows(self, tx_type: TransactionType) -> pd.DataFrame:
        df = self.ledger.to_frame()
        return df[df["Type"] == tx_type.value]

    def total_income(self) -> float:
        return float(self._rows(TransactionType.INCOME)["Amount"].sum())

    def total_expense(self) -> float:
        return float(self._rows(TransactionType.EXPENSE)["Amount"].sum())

    def balance(self) -> float:
        return self.total_income() - self.total_expense()

    def category_expenses(self) -> Dict[str, float]:
        """Summed expense amount per category, in first-appearance order.

        Categories without any expense transaction are left out.
        """
        expenses = self._rows(TransactionType.EXPENSE)
        if expenses.empty:
            return {}
        totals = expenses.groupby("Category", sort=False)["Amount"].sum()
        return {str(name): float(amount) for name, amount in totals.items()}

    def sorted_category_expenses(self) -> List[Tuple[str, float]]:
        # sorted() is stable, so ties stay in first-appearance order
        return sorted(self.category_expenses().items(), key=lambda item: item[1], reverse=True)

    def category_breakdown(self) -> pd.DataFrame:
        """Expense categories, largest first, with share of total and colour."""
        total = self.total_expense()
        rows = [
            {
                "Category": name,
                "Amount": amount,
                "Percentage": percentage_of_total(amount, total),
                "Color": get_category(name).color,
            }
            for name, amount in self.sorted_category_expenses()
        ]
        return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)

    def transaction_count(self) -> int:
        return len(self.ledger)

    def expense_count(self) -> int:
        return len(self._rows(TransactionType.EXPENSE))

    def category_count(self) -> int:
        return len(self.category_expenses())

    def average_expense_transaction(self) -> float:
        count = self.expense_count()
        if count == 0:
            return 0.0
        return self.total_expense() / count

    def highest_category_expense(self) -> float:
        return max(self.category_expenses().values(), default=0.0)

    def summary(self) -> Dict[str, Any]:
        """Headline figures for the dashboard and analytics screens."""
        income = self.total_income()
        expenses = self.total_expense()
        return {
            'income': income,
            'expenses': expenses,
            'balance': income - expenses,
            'transaction_count': self.transaction_count(),
            'category_count': self.category_count(),
            'average_expense': self.average_expense_transaction(),
            'highest_category_expense': self.highest_category_expense(),
        }
