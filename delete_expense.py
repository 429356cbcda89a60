#!/usr/bin/env python3
"""
Delete a Splitwise expense by id.

Usage:
    python delete_expense.py --help
    python delete_expense.py --id 3503931874
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from splitwise_scripts.cli.commands.delete_expense import main
from splitwise_scripts.core.config import validate_project_root

if __name__ == "__main__":
    validate_project_root()
    main()
