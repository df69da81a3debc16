"""The authenticated account and its teams."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Team:
    """A team the account belongs to."""

    name: str = ""
    uuid: str = ""


@dataclass
class Account:
    """The account the API token belongs to."""

    name: str = ""
    uuid: str = ""
    email: str = ""
    teams: list[Team] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        """Build an account from the ``data`` object of an API response."""
        data = data or {}
        return cls(
            name=data.get("name") or "",
            uuid=data.get("uuid") or "",
            email=data.get("email") or "",
            teams=[
                Team(name=team.get("name") or "", uuid=team.get("uuid") or "")
                for team in data.get("teams") or []
            ],
        )


class AccountClient:
    """Access to the ``/account`` endpoint."""

    def __init__(self, transport):
        self.transport = transport

    def get(self):
        """Fetch the account of the current token."""
        payload = self.transport.request("GET", "/account")
        return Account.from_dict(payload.get("data"))