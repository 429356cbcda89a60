#!/usr/bin/env python3
"""
Create a Splitwise expense split between two users.

Usage:
    python create_expense.py --help
    python create_expense.py --cost 22 --currency_code CAD --group_id 0 --user_id1 16073027 --paid_share1 22.00 --owed_share1 11.00 --user_id2 22088182 --paid_share2 0.00 --owed_share2 11.00 --description "Test"
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from splitwise_scripts.cli.commands.create_expense import main
from splitwise_scripts.core.config import validate_project_root

if __name__ == "__main__":
    validate_project_root()
    main()
