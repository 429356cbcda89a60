"""
Create Expense.

Adds a two-party expense split with creation method "equal".
"""

from typing import Any

from splitwise_scripts.api.requests import build_create_request
from splitwise_scripts.api.responses import Outcome, interpret_create
from splitwise_scripts.api.schemas import (
    AuthContext,
    ExpenseCreateRequest,
    Participant,
    PreparedRequest,
)
from splitwise_scripts.cli.runner import ScriptDefinition, make_command
from splitwise_scripts.core.config_schema import EndpointsSchema

REQUIRED = (
    "--cost",
    "--currency_code",
    "--group_id",
    "--user_id1",
    "--paid_share1",
    "--owed_share1",
    "--user_id2",
    "--paid_share2",
    "--owed_share2",
    "--description",
)
OPTIONAL = ("--category_id", "--date")

HELP_TEXT = """
Usage:
    python create_expense.py [options]

Options:
    --cost <amount>                The total cost of the expense.
    --currency_code <currency>     The currency code (e.g., USD, CAD).
    --group_id <group_id>          The group ID (use 0 for personal expenses).
    --user_id1 <id>                The first user's ID (payer).
    --paid_share1 <amount>         The amount paid by the first user.
    --owed_share1 <amount>         The amount owed by the first user.
    --user_id2 <id>                The second user's ID (splitter).
    --paid_share2 <amount>         The amount paid by the second user.
    --owed_share2 <amount>         The amount owed by the second user.
    --description <text>           A description of the expense.
    --category_id <id>             The category ID (optional).
    --date <date_string>           The date of the expense, YYYY-MM-DD (optional, defaults to today).
    --verbose                      Enable INFO level logging.
    --debug                        Enable DEBUG level logging.
    --help                         Show this help message.

Examples:
    python create_expense.py --cost 22 --currency_code CAD --group_id 0 --user_id1 16073027 --paid_share1 22.00 --owed_share1 11.00 --user_id2 22088182 --paid_share2 0.00 --owed_share2 11.00 --description "Test" --category_id 18 --date "2024-12-29"
"""

USAGE_TEXT = """
Usage:
    python create_expense.py --cost <amount> --currency_code <currency> --group_id <group_id> --user_id1 <id> --paid_share1 <amount> --owed_share1 <amount> --user_id2 <id> --paid_share2 <amount> --owed_share2 <amount> --description <text>

Use --help for more information.
"""


def expense_from_values(values: dict[str, str | None]) -> ExpenseCreateRequest:
    fields: dict[str, Any] = {
        "cost": values["cost"],
        "currency_code": values["currency_code"],
        "group_id": values["group_id"],
        "description": values["description"],
        "users": (
            Participant(
                user_id=values["user_id1"],
                paid_share=values["paid_share1"],
                owed_share=values["owed_share1"],
            ),
            Participant(
                user_id=values["user_id2"],
                paid_share=values["paid_share2"],
                owed_share=values["owed_share2"],
            ),
        ),
        "category_id": values.get("category_id"),
    }
    if values.get("date"):
        fields["date"] = values["date"]
    return ExpenseCreateRequest(**fields)


def build(values: dict[str, str | None], auth: AuthContext, endpoints: EndpointsSchema) -> PreparedRequest:
    return build_create_request(expense_from_values(values), auth, endpoints)


def interpret(body: Any, values: dict[str, str | None]) -> Outcome:
    return interpret_create(body)


SCRIPT = ScriptDefinition(
    name="create_expense",
    help_text=HELP_TEXT,
    usage_text=USAGE_TEXT,
    error_label="Error creating expense:",
    required=REQUIRED,
    optional=OPTIONAL,
    build=build,
    interpret=interpret,
)

main = make_command(SCRIPT)
