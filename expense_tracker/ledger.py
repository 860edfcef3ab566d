"""Transaction ledger.

The ledger is a single ordered list shared by every user of the running
app.  Insertion order is preserved and doubles as display order, including
for the "recent transactions" view, which shows the first entries added
rather than the newest ones.
"""

from __future__ import annotations

import logging
import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, List, Optional, Union

import pandas as pd

from . import config
from .categories import Category, TransactionType, resolve_category
from .errors import InvalidInput

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["id", "Date", "Type", "Category", "Description", "Amount"]


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Transaction:
    amount: float
    category: str
    type: TransactionType
    description: str = ""
    timestamp: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=_new_id)

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "Date": self.timestamp,
            "Type": self.type.value,
            "Category": self.category,
            "Description": self.description,
            "Amount": self.amount,
        }


class LedgerStore:
    """Ordered, in-memory store of transactions."""

    def __init__(self) -> None:
        self._transactions: List[Transaction] = []

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.all())

    def add(
        self,
        amount: float,
        category: Union[Category, str],
        type: Union[TransactionType, str],
        description: Optional[str] = "",
        timestamp: Optional[datetime] = None,
    ) -> Transaction:
        """Record a new transaction at the end of the ledger.

        The category must exist in the catalog and belong to ``type``.  The
        amount is stored as given apart from rejecting NaN and infinities;
        positivity is the input form's concern.
        """
        value = float(amount)
        if not math.isfinite(value):
            logger.warning("Rejected non-finite amount %r", amount)
            raise InvalidInput("Amount must be a finite number")
        tx_type = TransactionType.parse(type)
        resolved = resolve_category(category, tx_type)
        transaction = Transaction(
            amount=value,
            category=resolved.name,
            type=tx_type,
            description=description or "",
            timestamp=timestamp or datetime.now(),
        )
        self._transactions.append(transaction)
        logger.info(
            "Added %s transaction %s: %.2f in %s",
            tx_type.label.lower(), transaction.id, transaction.amount, resolved.name,
        )
        return transaction

    def remove(self, transaction_id: str) -> None:
        remaining = [t for t in self._transactions if t.id != transaction_id]
        if len(remaining) == len(self._transactions):
            logger.debug("Remove ignored, no transaction %s", transaction_id)
            return
        self._transactions = remaining
        logger.info("Removed transaction %s", transaction_id)

    def get(self, transaction_id: str) -> Optional[Transaction]:
        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    def all(self) -> List[Transaction]:
        return list(self._transactions)

    def recent(self, limit: Optional[int] = None) -> List[Transaction]:
        """Return the first ``limit`` transactions in insertion order."""
        if limit is None:
            limit = config.RECENT_TRANSACTIONS_LIMIT
        return self._transactions[:max(limit, 0)]

    def to_frame(self) -> pd.DataFrame:
        """Snapshot the ledger as a DataFrame, one row per transaction."""
        records = [t.to_record() for t in self._transactions]
        df = pd.DataFrame(records, columns=FRAME_COLUMNS)
        df["Amount"] = df["Amount"].astype(float)
        return df
