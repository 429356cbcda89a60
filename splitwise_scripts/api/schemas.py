"""
Splitwise Request Schemas.

Pydantic models for the values sent to the Splitwise web API. Every field
is kept as the exact string given on the command line; the API does its
own parsing of amounts and ids.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from splitwise_scripts.core.utils import utc_today_iso


class AuthContext(BaseModel):
    """
    Session credentials attached to every request.

    Built once per process from configuration and never mutated.
    """

    csrf_token: str = ""
    user_credentials: str = ""
    swdid: str = ""
    splitwise_session: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def cookie(self) -> str:
        """Cookie header value carrying the three session cookies."""
        return (
            f"user_credentials={self.user_credentials}; "
            f"swdid={self.swdid}; "
            f"_splitwise_session={self.splitwise_session}"
        )

    def missing_fields(self) -> list[str]:
        """Names of credentials that are empty."""
        return [name for name, value in self.model_dump().items() if not value]


class Participant(BaseModel):
    """One side of a two-party split."""

    user_id: str
    paid_share: str
    owed_share: str


class ExpenseCreateRequest(BaseModel):
    """Schema for creating an expense split between two users."""

    cost: str = Field(description="Total cost as a decimal string", examples=["22"])
    currency_code: str = Field(examples=["CAD"])
    group_id: str = Field(description="Group id, 0 for a personal expense", examples=["0"])
    description: str
    creation_method: str = "equal"
    date: str = Field(default_factory=utc_today_iso, description="YYYY-MM-DD")
    users: tuple[Participant, Participant]
    category_id: str | None = None

    def to_form(self) -> dict[str, str]:
        """Flatten into the form fields the create endpoint expects."""
        form = {
            "cost": self.cost,
            "currency_code": self.currency_code,
            "group_id": self.group_id,
            "description": self.description,
            "creation_method": self.creation_method,
            "date": self.date,
        }
        for index, user in enumerate(self.users):
            form[f"users__{index}__user_id"] = user.user_id
            form[f"users__{index}__paid_share"] = user.paid_share
            form[f"users__{index}__owed_share"] = user.owed_share

        if self.category_id:
            form["category_id"] = self.category_id

        return form


class ExpenseDeleteRequest(BaseModel):
    """Schema for deleting one expense."""

    expense_id: str = Field(examples=["3503931874"])


class ExpenseListQuery(BaseModel):
    """Query for the expenses shared with one friend, outside any group."""

    friend_id: str
    limit: str

    def to_params(self) -> dict[str, str]:
        return {
            "visible": "true",
            "order": "date",
            "friend_id": self.friend_id,
            "limit": self.limit,
            "group_id": "0",
        }


class PreparedRequest(BaseModel):
    """A fully built request, ready to hand to the HTTP client."""

    method: str
    path: str
    headers: dict[str, str]
    data: dict[str, str] | None = None
    params: dict[str, str] | None = None

    def to_httpx_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"headers": self.headers}
        if self.data is not None:
            kwargs["data"] = self.data
        if self.params is not None:
            kwargs["params"] = self.params
        return kwargs
