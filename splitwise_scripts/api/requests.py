"""
Request Builders.

One builder per Splitwise endpoint. Builders are pure: they take the
request values and the AuthContext and return a PreparedRequest, so the
exact wire shape can be checked without a network.
"""

from urllib.parse import quote

from splitwise_scripts.api.schemas import (
    AuthContext,
    ExpenseCreateRequest,
    ExpenseDeleteRequest,
    ExpenseListQuery,
    PreparedRequest,
)
from splitwise_scripts.core.config_schema import EndpointsSchema

ACCEPT = "application/json, text/javascript, */*; q=0.01"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_headers(auth: AuthContext) -> dict[str, str]:
    """Headers shared by every call: JSON accept, CSRF token, session cookies."""
    return {
        "Accept": ACCEPT,
        "X-CSRF-Token": auth.csrf_token,
        "Cookie": auth.cookie,
        "X-Requested-With": "XMLHttpRequest",
    }


def build_create_request(
    expense: ExpenseCreateRequest,
    auth: AuthContext,
    endpoints: EndpointsSchema,
) -> PreparedRequest:
    headers = build_headers(auth)
    headers["Content-Type"] = FORM_CONTENT_TYPE
    return PreparedRequest(
        method="POST",
        path=endpoints.create_expense,
        headers=headers,
        data=expense.to_form(),
    )


def build_delete_request(
    delete: ExpenseDeleteRequest,
    auth: AuthContext,
    endpoints: EndpointsSchema,
) -> PreparedRequest:
    """Deletion is a bodiless POST to the id-specific path, not an HTTP DELETE."""
    headers = build_headers(auth)
    headers["Content-Length"] = "0"
    path = endpoints.delete_expense.format(expense_id=quote(delete.expense_id, safe=""))
    return PreparedRequest(method="POST", path=path, headers=headers)


def build_list_request(
    query: ExpenseListQuery,
    auth: AuthContext,
    endpoints: EndpointsSchema,
) -> PreparedRequest:
    return PreparedRequest(
        method="GET",
        path=endpoints.get_expenses,
        headers=build_headers(auth),
        params=query.to_params(),
    )
