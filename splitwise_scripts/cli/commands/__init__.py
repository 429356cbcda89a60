"""
CLI Commands.

One module per script.
"""

from splitwise_scripts.cli.commands.create_expense import main as create_expense
from splitwise_scripts.cli.commands.delete_expense import main as delete_expense
from splitwise_scripts.cli.commands.list_friend_expenses import main as list_friend_expenses

__all__ = [
    "create_expense",
    "delete_expense",
    "list_friend_expenses",
]
