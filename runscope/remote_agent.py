"""Remote agents connected to a team."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RemoteAgent:
    """A remote agent as reported by the API."""

    id: str = ""
    name: str = ""
    version: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build a remote agent from its API representation."""
        data = data or {}
        return cls(
            id=data.get("agent_id") or "",
            name=data.get("name") or "",
            version=data.get("version") or "",
        )


class RemoteAgentClient:
    """List the agents connected to a team."""

    def __init__(self, transport):
        self.transport = transport

    def list(self, team_uuid):
        """Return the team's currently connected agents."""
        payload = self.transport.request("GET", f"/teams/{team_uuid}/agents")
        return [RemoteAgent.from_dict(item) for item in payload.get("data") or []]