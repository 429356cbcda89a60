#!/usr/bin/env python3
"""
List the expenses shared with one Splitwise friend.

Usage:
    python list_friend_expenses.py --help
    python list_friend_expenses.py --friend_id 22088182 --limit 25
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from splitwise_scripts.cli.commands.list_friend_expenses import main
from splitwise_scripts.core.config import validate_project_root

if __name__ == "__main__":
    validate_project_root()
    main()
