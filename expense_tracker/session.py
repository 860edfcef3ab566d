"""Screen navigation and login session.

The app shows exactly one screen at a time.  :class:`SessionController`
owns the active screen and the logged-in user, and is the only place that
UI button handlers call into: it forwards mutations to the user directory
and ledger, then moves to the next screen.
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .categories import Category, TransactionType
from .errors import InvalidTransition
from .ledger import LedgerStore, Transaction
from .users import User, UserDirectory

logger = logging.getLogger(__name__)


class Screen(str, Enum):
    LOGIN = "Login"
    REGISTER = "Register"
    DASHBOARD = "Dashboard"
    ADD_TRANSACTION = "AddTransaction"
    TRANSACTIONS = "Transactions"
    ANALYTICS = "Analytics"


SUB_SCREENS = (Screen.ADD_TRANSACTION, Screen.TRANSACTIONS, Screen.ANALYTICS)

TRANSITIONS: Dict[Tuple[Screen, str], Screen] = {
    (Screen.LOGIN, 'go_to_register'): Screen.REGISTER,
    (Screen.REGISTER, 'go_to_login'): Screen.LOGIN,
    (Screen.LOGIN, 'login_success'): Screen.DASHBOARD,
    (Screen.REGISTER, 'register_success'): Screen.DASHBOARD,
    (Screen.DASHBOARD, 'open_add_transaction'): Screen.ADD_TRANSACTION,
    (Screen.DASHBOARD, 'open_transactions'): Screen.TRANSACTIONS,
    (Screen.DASHBOARD, 'open_analytics'): Screen.ANALYTICS,
    (Screen.DASHBOARD, 'logout'): Screen.LOGIN,
}
TRANSITIONS.update({(screen, 'back'): Screen.DASHBOARD for screen in SUB_SCREENS})

# Edges that change who is logged in; only reachable through the controller
_AUTH_ACTIONS = {'login_success', 'register_success', 'logout'}


def next_screen(current: Screen, action: str) -> Screen:
    """Return the screen reached from ``current`` by ``action``.

    Raises:
        InvalidTransition: If ``action`` is not allowed from ``current``
    """
    try:
        return TRANSITIONS[(current, action)]
    except KeyError:
        raise InvalidTransition(f"Cannot {action!r} from the {current.value} screen") from None


class SessionController:
    """Active screen plus current user, wired to the directory and ledger."""

    def __init__(self, users: UserDirectory, ledger: LedgerStore) -> None:
        self.users = users
        self.ledger = ledger
        self.current_user: Optional[User] = None
        self.active_screen: Screen = Screen.LOGIN

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def _fire(self, action: str) -> Screen:
        target = next_screen(self.active_screen, action)
        logger.debug("Navigate %s -%s-> %s", self.active_screen.value, action, target.value)
        self.active_screen = target
        return target

    def navigate(self, action: str) -> Screen:
        """Follow a plain navigation edge such as ``'open_analytics'`` or ``'back'``."""
        if action in _AUTH_ACTIONS:
            raise InvalidTransition(f"{action!r} must go through login, register or logout")
        return self._fire(action)

    # Auth -------------------------------------------------------------------

    def login(self, email: str, password: str) -> User:
        next_screen(self.active_screen, 'login_success')
        user = self.users.authenticate(email, password)
        self.current_user = user
        self._fire('login_success')
        return user

    def register(self, name: str, email: str, password: str) -> User:
        next_screen(self.active_screen, 'register_success')
        user = self.users.register(name, email, password)
        self.current_user = user
        self._fire('register_success')
        return user

    def logout(self) -> None:
        self._fire('logout')
        if self.current_user is not None:
            logger.info("Logged out %s", self.current_user.email)
        self.current_user = None

    # Ledger -----------------------------------------------------------------

    def add_transaction(
        self,
        amount: float,
        category: Union[Category, str],
        type: Union[TransactionType, str],
        description: str = "",
        timestamp: Optional[datetime] = None,
    ) -> Transaction:
        """Record a transaction and return to the dashboard."""
        if self.active_screen is not Screen.ADD_TRANSACTION:
            raise InvalidTransition(f"Cannot add a transaction from the {self.active_screen.value} screen")
        transaction = self.ledger.add(amount, category, type, description, timestamp)
        self._fire('back')
        return transaction

    def delete_transaction(self, transaction_id: str) -> None:
        self.ledger.remove(transaction_id)
