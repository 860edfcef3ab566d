#!/usr/bin/env python3
"""Direct launcher for the Expense Tracker.

This script launches Streamlit on ``expense_tracker/app.py`` using the
current interpreter.
"""

import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()
app_path = project_root / "expense_tracker" / "app.py"

if __name__ == "__main__":
    sys.exit(subprocess.run([sys.executable, "-m", "streamlit", "run", str(app_path)]).returncode)
