"""Third-party integrations configured for a team."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Integration:
    """A team integration such as a pager or chat service."""

    uuid: str = ""
    type: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build an integration from its API representation."""
        data = data or {}
        return cls(
            uuid=data.get("uuid") or "",
            type=data.get("type") or "",
            description=data.get("description") or "",
        )


class IntegrationClient:
    """List the integrations of a team."""

    def __init__(self, transport):
        self.transport = transport

    def list(self, team_id):
        """Return every integration of the given team."""
        payload = self.transport.request("GET", f"/teams/{team_id}/integrations")
        return [Integration.from_dict(item) for item in payload.get("data") or []]