import pytest

from expense_tracker.categories import TransactionType
from expense_tracker.errors import InvalidCredentials, InvalidTransition
from expense_tracker.session import Screen, next_screen
from expense_tracker.state import AppState


def _logged_in_state():
    state = AppState()
    state.session.navigate('go_to_register')
    state.session.register("Asha", "a@b.com", "pw")
    return state


def test_initial_screen_is_login():
    state = AppState()
    assert state.session.active_screen is Screen.LOGIN
    assert state.session.current_user is None


def test_register_logs_in_and_opens_dashboard():
    state = _logged_in_state()
    assert state.session.active_screen is Screen.DASHBOARD
    assert state.session.current_user.email == "a@b.com"
    assert len(state.users) == 1


def test_logout_then_login():
    state = _logged_in_state()
    state.session.logout()
    assert state.session.active_screen is Screen.LOGIN
    assert not state.session.is_authenticated

    user = state.session.login("a@b.com", "pw")
    assert state.session.current_user == user
    assert state.session.active_screen is Screen.DASHBOARD


def test_failed_login_stays_on_login_screen():
    state = _logged_in_state()
    state.session.logout()
    with pytest.raises(InvalidCredentials):
        state.session.login("a@b.com", "wrong")
    assert state.session.active_screen is Screen.LOGIN
    assert state.session.current_user is None


@pytest.mark.parametrize("action,screen", [
    ('open_add_transaction', Screen.ADD_TRANSACTION),
    ('open_transactions', Screen.TRANSACTIONS),
    ('open_analytics', Screen.ANALYTICS),
])
def test_sub_screens_go_back_to_dashboard(action, screen):
    state = _logged_in_state()
    assert state.session.navigate(action) is screen
    assert state.session.navigate('back') is Screen.DASHBOARD


def test_invalid_transitions_raise():
    with pytest.raises(InvalidTransition):
        next_screen(Screen.LOGIN, 'open_analytics')
    with pytest.raises(InvalidTransition):
        next_screen(Screen.DASHBOARD, 'back')
    state = AppState()
    with pytest.raises(InvalidTransition):
        state.session.navigate('login_success')
    assert state.session.active_screen is Screen.LOGIN


def test_add_transaction_returns_to_dashboard():
    state = _logged_in_state()
    state.session.navigate('open_add_transaction')
    tx = state.session.add_transaction(250, "Food", TransactionType.EXPENSE, "Dinner")
    assert state.session.active_screen is Screen.DASHBOARD
    assert state.ledger.all() == [tx]


def test_add_transaction_only_from_add_screen():
    state = _logged_in_state()
    with pytest.raises(InvalidTransition):
        state.session.add_transaction(10, "Food", TransactionType.EXPENSE)
    assert len(state.ledger) == 0


def test_delete_transaction_keeps_screen():
    state = _logged_in_state()
    state.session.navigate('open_add_transaction')
    tx = state.session.add_transaction(10, "Food", TransactionType.EXPENSE)
    state.session.navigate('open_transactions')
    state.session.delete_transaction(tx.id)
    assert len(state.ledger) == 0
    assert state.session.active_screen is Screen.TRANSACTIONS


def test_ledger_is_shared_between_users():
    state = _logged_in_state()
    state.session.navigate('open_add_transaction')
    state.session.add_transaction(10, "Food", TransactionType.EXPENSE)
    state.session.logout()
    state.session.navigate('go_to_register')
    state.session.register("Ben", "ben@b.com", "pw")
    assert len(state.ledger) == 1
    assert state.analytics.total_expense() == 10
