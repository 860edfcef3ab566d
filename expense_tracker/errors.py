"""Exception types raised by the expense tracker core.

Every error carries a short, user-facing message so the UI layer can show
``str(exc)`` inline on the form that triggered it.
"""

from __future__ import annotations


class ExpenseTrackerError(ValueError):
    """Base class for all expense tracker errors."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidInput(ExpenseTrackerError):
    default_message = "Please fill all fields"


class DuplicateEmail(ExpenseTrackerError):
    default_message = "Email already registered"


class InvalidCredentials(ExpenseTrackerError):
    default_message = "Invalid email or password"


class UnknownCategory(ExpenseTrackerError):
    default_message = "Unknown category"


class CategoryTypeMismatch(ExpenseTrackerError):
    default_message = "Category does not match the transaction type"


class InvalidTransition(ExpenseTrackerError):
    default_message = "Navigation not allowed from this screen"
