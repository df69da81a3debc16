"""Buckets: containers for tests within a team."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote_plus

from runscope.account import Team

BUCKETS_PATH = "/buckets"


@dataclass
class Bucket:
    """A bucket as reported by the API."""

    key: str = ""
    name: str = ""
    team: Team = field(default_factory=Team)
    auth_token: str = ""
    default: bool = False
    verify_ssl: bool = False
    trigger_url: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build a bucket from its API representation."""
        data = data or {}
        team = data.get("team") or {}
        return cls(
            key=data.get("key") or "",
            name=data.get("name") or "",
            team=Team(name=team.get("name") or "", uuid=team.get("id") or ""),
            auth_token=data.get("auth_token") or "",
            default=bool(data.get("default")),
            verify_ssl=bool(data.get("verify_ssl")),
            trigger_url=data.get("trigger_url") or "",
        )


def bucket_create_path(name, team_uuid):
    """Path of the request that creates a bucket named ``name``."""
    return (
        f"{BUCKETS_PATH}?name={quote_plus(name, safe='')}"
        f"&team_uuid={quote_plus(team_uuid, safe='')}"
    )


def _bucket_path(key):
    return f"{BUCKETS_PATH}/{key}"


class BucketClient:
    """Create, read, list and delete buckets."""

    def __init__(self, transport):
        self.transport = transport

    def create(self, name, team_uuid):
        """Create a bucket in the given team."""
        payload = self.transport.request("POST", bucket_create_path(name, team_uuid))
        return Bucket.from_dict(payload.get("data"))

    def get(self, key):
        """Fetch a bucket by its key."""
        payload = self.transport.request("GET", _bucket_path(key))
        return Bucket.from_dict(payload.get("data"))

    def list(self):
        """List every bucket visible to the token."""
        payload = self.transport.request("GET", BUCKETS_PATH)
        return [Bucket.from_dict(item) for item in payload.get("data") or []]

    def delete(self, key):
        """Delete a bucket by its key."""
        self.transport.send(self.transport.prepare("DELETE", _bucket_path(key)))