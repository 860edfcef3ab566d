"""Fixed catalog of income and expense categories.

The catalog is a process-wide constant: eleven categories, each tagged with
the transaction type it belongs to plus the icon and colour the UI shows for
it.  Catalog order is display order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .errors import CategoryTypeMismatch, InvalidInput, UnknownCategory


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

    @property
    def label(self) -> str:
        return self.value.title()

    @classmethod
    def parse(cls, value: Union["TransactionType", str]) -> "TransactionType":
        """Accept an enum member or a case-insensitive name such as ``"Income"``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise InvalidInput(f"Unknown transaction type: {value!r}") from None


@dataclass(frozen=True)
class Category:
    name: str
    type: TransactionType
    icon: str
    color: str


CATEGORIES: tuple = (
    Category("Salary", TransactionType.INCOME, "🏦", "#4CAF50"),
    Category("Business", TransactionType.INCOME, "💼", "#2196F3"),
    Category("Investment", TransactionType.INCOME, "📈", "#9C27B0"),
    Category("Food", TransactionType.EXPENSE, "🍽️", "#FF5722"),
    Category("Transport", TransactionType.EXPENSE, "🚗", "#795548"),
    Category("Shopping", TransactionType.EXPENSE, "🛒", "#E91E63"),
    Category("Bills", TransactionType.EXPENSE, "🧾", "#FF9800"),
    Category("Entertainment", TransactionType.EXPENSE, "🎬", "#673AB7"),
    Category("Health", TransactionType.EXPENSE, "🏥", "#F44336"),
    Category("Education", TransactionType.EXPENSE, "🎓", "#3F51B5"),
    Category("Other", TransactionType.EXPENSE, "⋯", "#607D8B"),
)

_BY_NAME = {category.name: category for category in CATEGORIES}


def list_categories(type: Optional[Union[TransactionType, str]] = None) -> List[Category]:
    """Return the catalog, optionally restricted to one transaction type."""
    if type is None:
        return list(CATEGORIES)
    wanted = TransactionType.parse(type)
    return [category for category in CATEGORIES if category.type is wanted]


def get_category(name: str) -> Category:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownCategory(f"Unknown category: {name!r}") from None


def resolve_category(
    category: Union[Category, str],
    type: Union[TransactionType, str],
) -> Category:
    """Look up ``category`` and check it belongs to ``type``.

    Args:
        category: A catalog entry or its exact name
        type: The type of the transaction being recorded

    Returns:
        The catalog entry

    Raises:
        UnknownCategory: If the name is not in the catalog
        CategoryTypeMismatch: If the category belongs to the other type
    """
    name = category.name if isinstance(category, Category) else category
    resolved = get_category(name)
    wanted = TransactionType.parse(type)
    if resolved.type is not wanted:
        raise CategoryTypeMismatch(
            f"Category {resolved.name!r} is an {resolved.type.label.lower()} category, "
            f"not {wanted.label.lower()}"
        )
    return resolved
