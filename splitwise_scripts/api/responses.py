"""
Response Interpreters.

Each endpoint reports success differently, and the rules are kept apart on
purpose:

- create: a non-empty ``errors`` field means the expense was rejected.
- delete: the presence of ``errors``, even empty, means the delete went
  through. A body without it is reported as ambiguous. A body that is not a
  JSON object cannot be checked and raises MalformedResponseError.
- list: the body is returned as-is.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from splitwise_scripts.core.exceptions import MalformedResponseError


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class Outcome:
    """Interpreted result of one API call."""

    status: OutcomeStatus
    message: str
    payload: Any = None

    @property
    def failed(self) -> bool:
        return self.status is OutcomeStatus.FAILURE


def interpret_create(body: Any) -> Outcome:
    errors = body.get("errors") if isinstance(body, dict) else None
    if errors:
        return Outcome(OutcomeStatus.FAILURE, "Failed to create expense:", errors)
    return Outcome(OutcomeStatus.SUCCESS, "Expense created successfully:", body)


def interpret_delete(body: Any, expense_id: str) -> Outcome:
    if not isinstance(body, dict):
        raise MalformedResponseError(f"Expected a JSON object, got {type(body).__name__}")
    if "errors" in body:
        return Outcome(
            OutcomeStatus.SUCCESS,
            f"Expense with ID {expense_id} deleted successfully:",
            body,
        )
    return Outcome(
        OutcomeStatus.AMBIGUOUS,
        f"Expense with ID {expense_id} might have already been deleted or the ID is incorrect.",
    )


def interpret_list(body: Any) -> Outcome:
    return Outcome(OutcomeStatus.SUCCESS, "Response data:", body)
