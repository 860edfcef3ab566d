"""Top‑level package for the Expense Tracker.

The primary modules are:

* ``categories`` – the fixed income/expense category catalog
* ``users`` – the in-memory user directory
* ``ledger`` – the transaction ledger
* ``analytics`` – totals, balance and category breakdowns
* ``session`` – screen navigation and the logged-in user
* ``app`` – a Streamlit app that ties everything together

To run the app from the command line you can execute:

```bash
streamlit run expense_tracker/app.py
```
"""

from . import analytics  # noqa: F401  # re-exported for convenience
from . import categories  # noqa: F401  # re-exported for convenience
from . import ledger  # noqa: F401  # re-exported for convenience
from . import session  # noqa: F401  # re-exported for convenience
from . import users  # noqa: F401  # re-exported for convenience
from .state import AppState  # noqa: F401
# Streamlit may not be installed in all environments (e.g. during unit
# testing), so the app module is optional.
try:
    from . import app  # type: ignore  # noqa: F401
except ModuleNotFoundError:
    app = None  # type: ignore


__all__ = ["AppState", "analytics", "app", "categories", "ledger", "session", "users"]
