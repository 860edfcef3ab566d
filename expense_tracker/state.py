"""Application state container.

One :class:`AppState` is created per running app and handed explicitly to
every screen; nothing in the package keeps module-level mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .analytics import LedgerAnalytics
from .ledger import LedgerStore
from .session import SessionController
from .users import UserDirectory


@dataclass
class AppState:
    users: UserDirectory = field(default_factory=UserDirectory)
    ledger: LedgerStore = field(default_factory=LedgerStore)
    session: SessionController = field(init=False)

    def __post_init__(self) -> None:
        self.session = SessionController(self.users, self.ledger)

    @property
    def analytics(self) -> LedgerAnalytics:
        return LedgerAnalytics(self.ledger)
