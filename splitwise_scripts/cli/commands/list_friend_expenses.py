"""
List Friend Expenses.

Fetches the visible, non-group expenses shared with one friend, newest first.
"""

from typing import Any

from splitwise_scripts.api.requests import build_list_request
from splitwise_scripts.api.responses import Outcome, interpret_list
from splitwise_scripts.api.schemas import AuthContext, ExpenseListQuery, PreparedRequest
from splitwise_scripts.cli.runner import ScriptDefinition, make_command
from splitwise_scripts.core.config_schema import EndpointsSchema

HELP_TEXT = """
Usage:
    python list_friend_expenses.py [options]

Options:
    --friend_id <id>       The Splitwise friend ID to fetch expenses for.
    --limit <number>       The maximum number of expenses to fetch.
    --verbose              Enable INFO level logging.
    --debug                Enable DEBUG level logging.
    --help                 Show this help message.

Examples:
    python list_friend_expenses.py --friend_id 22088182 --limit 25
"""

USAGE_TEXT = """
Usage:
    python list_friend_expenses.py --friend_id <id> --limit <number>

Use --help for more information.
"""


def build(values: dict[str, str | None], auth: AuthContext, endpoints: EndpointsSchema) -> PreparedRequest:
    query = ExpenseListQuery(friend_id=values["friend_id"], limit=values["limit"])
    return build_list_request(query, auth, endpoints)


def interpret(body: Any, values: dict[str, str | None]) -> Outcome:
    return interpret_list(body)


SCRIPT = ScriptDefinition(
    name="list_friend_expenses",
    help_text=HELP_TEXT,
    usage_text=USAGE_TEXT,
    error_label="Error fetching expenses:",
    required=("--friend_id", "--limit"),
    build=build,
    interpret=interpret,
)

main = make_command(SCRIPT)
