"""Expense Tracker - Streamlit entry point.

Run with ``streamlit run expense_tracker/app.py`` (or ``python
run_expense_tracker.py``).  Each rerun looks up the :class:`AppState`
stored in ``st.session_state`` and renders the screen the session
controller says is active.  Screens only read state; button handlers go
through the session controller and then trigger a rerun.
"""

from __future__ import annotations

import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Dict, Optional

import streamlit as st

if __package__ in (None, ""):
    # Launched as a script by ``streamlit run``; make the package importable
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

from expense_tracker import config
from expense_tracker.categories import Category, TransactionType, get_category, list_categories
from expense_tracker.errors import ExpenseTrackerError
from expense_tracker.formatting import filter_amount_input, format_currency, format_date, parse_amount
from expense_tracker.ledger import Transaction
from expense_tracker.session import Screen
from expense_tracker.state import AppState
from expense_tracker.visualization import create_category_bar_chart, create_income_expense_pie_chart

logger = logging.getLogger(__name__)

STATE_KEY = 'app_state'
AMOUNT_KEY = 'amount_text'


def get_app_state() -> AppState:
    """Return this browser session's state, creating it on first use."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = AppState()
        logger.info("Created new application state")
    return st.session_state[STATE_KEY]


def _rerun() -> None:
    rerun_fn = getattr(st, 'rerun', None) or getattr(st, 'experimental_rerun', None)
    if rerun_fn:
        rerun_fn()


def _go(state: AppState, action: str) -> None:
    state.session.navigate(action)
    _rerun()


# ---------------------------------------------------------------------------
# Form handlers
# ---------------------------------------------------------------------------


def handle_login(state: AppState, email: str, password: str) -> Optional[str]:
    """Log in, returning an inline error message on failure."""
    try:
        state.session.login(email, password)
    except ExpenseTrackerError as exc:
        return str(exc)
    return None


def handle_register(state: AppState, name: str, email: str, password: str) -> Optional[str]:
    try:
        state.session.register(name, email, password)
    except ExpenseTrackerError as exc:
        return str(exc)
    return None


def handle_add_transaction(
    state: AppState,
    amount_text: str,
    category: Optional[Category],
    tx_type: TransactionType,
    description: str = "",
    when: Optional[date] = None,
) -> Optional[Transaction]:
    """Add a transaction when both an amount and a category are present.

    ``when`` is the day picked on the form; the time of day comes from the
    clock at submission.
    """
    amount = parse_amount(amount_text)
    if amount is None or category is None:
        return None
    timestamp = datetime.combine(when, datetime.now().time()) if when is not None else None
    return state.session.add_transaction(amount, category, tx_type, description, timestamp)


def _filter_amount_field() -> None:
    st.session_state[AMOUNT_KEY] = filter_amount_input(st.session_state.get(AMOUNT_KEY, ""))


# ---------------------------------------------------------------------------
# Screens
# ---------------------------------------------------------------------------


def render_login(state: AppState) -> None:
    st.title(f"{config.APP_ICON} {config.APP_TITLE}")
    st.subheader("Welcome back")
    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login", use_container_width=True)
    if submitted:
        error = handle_login(state, email, password)
        if error:
            st.error(error)
        else:
            _rerun()
    if st.button("Don't have an account? Register"):
        _go(state, 'go_to_register')


def render_register(state: AppState) -> None:
    st.title("Create Account")
    with st.form("register_form"):
        name = st.text_input("Full Name")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Register", use_container_width=True)
    if submitted:
        error = handle_register(state, name, email, password)
        if error:
            st.error(error)
        else:
            _rerun()
    if st.button("Already have an account? Login"):
        _go(state, 'go_to_login')


def _render_transaction_row(state: AppState, transaction: Transaction, *, deletable: bool = False) -> None:
    category = get_category(transaction.category)
    income = transaction.type is TransactionType.INCOME
    sign = "+" if income else "-"
    if deletable:
        col1, col2, col3 = st.columns([5, 2, 1])
    else:
        col1, col2 = st.columns([5, 2])
    with col1:
        st.markdown(f"{category.icon} **{transaction.category}**")
        caption = format_date(transaction.timestamp)
        if transaction.description:
            caption = f"{transaction.description} · {caption}"
        st.caption(caption)
    with col2:
        color = "green" if income else "red"
        st.markdown(f":{color}[{sign}{format_currency(transaction.amount)}]")
    if deletable:
        with col3:
            if st.button("🗑️", key=f"delete_{transaction.id}", help="Delete transaction"):
                state.session.delete_transaction(transaction.id)
                _rerun()


def render_dashboard(state: AppState) -> None:
    user = state.session.current_user
    summary = state.analytics.summary()

    header, logout = st.columns([4, 1])
    with header:
        st.title(f"Hello, {user.name if user else 'there'} 👋")
    with logout:
        if st.button("Logout", use_container_width=True):
            state.session.logout()
            _rerun()

    st.metric("💰 Total Balance", format_currency(summary['balance']))
    col1, col2 = st.columns(2)
    with col1:
        st.metric("📈 Income", format_currency(summary['income']))
    with col2:
        st.metric("📉 Expense", format_currency(summary['expenses']))

    st.subheader("Quick Actions")
    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("➕ Add", use_container_width=True):
            _go(state, 'open_add_transaction')
    with col2:
        if st.button("📋 History", use_container_width=True):
            _go(state, 'open_transactions')
    with col3:
        if st.button("📊 Analytics", use_container_width=True):
            _go(state, 'open_analytics')

    st.subheader("Recent Transactions")
    recent = state.ledger.recent()
    if not recent:
        st.info("No transactions yet")
        return
    for transaction in recent:
        _render_transaction_row(state, transaction)


def _back_button(state: AppState) -> None:
    if st.button("← Back"):
        _go(state, 'back')


def render_add_transaction(state: AppState) -> None:
    _back_button(state)
    st.title("Add Transaction")

    type_label = st.radio(
        "Transaction Type",
        options=[TransactionType.EXPENSE.label, TransactionType.INCOME.label],
        horizontal=True,
    )
    tx_type = TransactionType.parse(type_label)

    st.text_input(
        f"Amount ({config.CURRENCY_SYMBOL})",
        key=AMOUNT_KEY,
        on_change=_filter_amount_field,
    )
    # Widget key is per type so switching type clears the chosen category
    category = st.selectbox(
        "Category",
        options=list_categories(tx_type),
        index=None,
        format_func=lambda c: f"{c.icon} {c.name}",
        key=f"category_{tx_type.value}",
    )
    when = st.date_input("Date", value=date.today(), format="DD/MM/YYYY")
    description = st.text_area("Description")

    amount_text = st.session_state.get(AMOUNT_KEY, "")
    ready = parse_amount(amount_text) is not None and category is not None
    if st.button("Add Transaction", disabled=not ready, use_container_width=True, type="primary"):
        try:
            added = handle_add_transaction(state, amount_text, category, tx_type, description, when)
        except ExpenseTrackerError as exc:
            st.error(str(exc))
            return
        if added:
            st.session_state.pop(AMOUNT_KEY, None)
            _rerun()


def render_transactions(state: AppState) -> None:
    _back_button(state)
    st.title("All Transactions")
    transactions = state.ledger.all()
    if not transactions:
        st.info("No transactions yet")
        return
    for transaction in transactions:
        _render_transaction_row(state, transaction, deletable=True)


def render_analytics(state: AppState) -> None:
    _back_button(state)
    st.title("Analytics")
    analytics = state.analytics
    summary = analytics.summary()

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Total Expense", format_currency(summary['expenses']))
    with col2:
        st.metric("Total Income", format_currency(summary['income']))

    breakdown = analytics.category_breakdown()
    if breakdown.empty:
        st.info("📊 No expense data yet")
        return

    st.subheader("Spending by Category")
    st.plotly_chart(create_category_bar_chart(breakdown), use_container_width=True)
    for row in breakdown.itertuples(index=False):
        category = get_category(row.Category)
        left, right = st.columns([3, 1])
        left.markdown(f"{category.icon} **{row.Category}** · {row.Percentage}%")
        right.markdown(format_currency(row.Amount))
        st.progress(min(max(int(row.Percentage), 0), 100))

    st.plotly_chart(
        create_income_expense_pie_chart(summary['income'], summary['expenses']),
        use_container_width=True,
    )

    st.subheader("Statistics")
    col1, col2 = st.columns(2)
    col1.metric("🧾 Transactions", summary['transaction_count'])
    col2.metric("🗂️ Categories", summary['category_count'])
    col1, col2 = st.columns(2)
    col1.metric("🧮 Avg. Transaction", format_currency(summary['average_expense']))
    col2.metric("🔝 Highest", format_currency(summary['highest_category_expense']))


SCREEN_RENDERERS: Dict[Screen, Callable[[AppState], None]] = {
    Screen.LOGIN: render_login,
    Screen.REGISTER: render_register,
    Screen.DASHBOARD: render_dashboard,
    Screen.ADD_TRANSACTION: render_add_transaction,
    Screen.TRANSACTIONS: render_transactions,
    Screen.ANALYTICS: render_analytics,
}


def main() -> None:
    """Main entry point for the expense tracker app."""
    st.set_page_config(
        page_title=config.APP_TITLE,
        page_icon=config.APP_ICON,
        layout="centered",
    )
    config.configure_logging()
    state = get_app_state()
    SCREEN_RENDERERS[state.session.active_screen](state)


if __name__ == "__main__":
    main()
