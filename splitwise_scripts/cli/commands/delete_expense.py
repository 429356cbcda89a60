"""
Delete Expense.

Deletes one expense by id.
"""

from typing import Any

from splitwise_scripts.api.requests import build_delete_request
from splitwise_scripts.api.responses import Outcome, interpret_delete
from splitwise_scripts.api.schemas import AuthContext, ExpenseDeleteRequest, PreparedRequest
from splitwise_scripts.cli.runner import ScriptDefinition, make_command
from splitwise_scripts.core.config_schema import EndpointsSchema

HELP_TEXT = """
Usage:
    python delete_expense.py [options]

Options:
    --id <expense_id>      The ID of the expense to delete.
    --verbose              Enable INFO level logging.
    --debug                Enable DEBUG level logging.
    --help                 Show this help message.

Examples:
    python delete_expense.py --id 3503931874
"""

USAGE_TEXT = """
Usage:
    python delete_expense.py --id <expense_id>

Use --help for more information.
"""


def build(values: dict[str, str | None], auth: AuthContext, endpoints: EndpointsSchema) -> PreparedRequest:
    return build_delete_request(ExpenseDeleteRequest(expense_id=values["id"]), auth, endpoints)


def interpret(body: Any, values: dict[str, str | None]) -> Outcome:
    return interpret_delete(body, values["id"])


SCRIPT = ScriptDefinition(
    name="delete_expense",
    help_text=HELP_TEXT,
    usage_text=USAGE_TEXT,
    error_label="Error deleting expense with ID {id}:",
    required=("--id",),
    build=build,
    interpret=interpret,
)

main = make_command(SCRIPT)
