"""Environments: shared or per-test settings under which tests run."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class EnvironmentRemoteAgent:
    """A remote agent an environment runs its tests from."""

    name: str = ""
    uuid: str = ""


@dataclass
class Recipient:
    """A person notified by e-mail about test results."""

    id: str = ""
    name: str = ""
    email: str = ""


@dataclass
class Emails:
    """E-mail notification settings of an environment."""

    notify_all: bool = False
    notify_on: str = ""
    notify_threshold: int = 0
    recipients: list[Recipient] = field(default_factory=list)

    def is_default(self):
        """Whether nothing differs from the unset notification settings."""
        return (
            not self.notify_all
            and self.notify_on == ""
            and self.notify_threshold == 0
            and not self.recipients
        )

    def _to_dict(self):
        return {
            "notify_all": self.notify_all,
            "notify_on": self.notify_on,
            "notify_threshold": self.notify_threshold,
            "recipients": [
                {"id": r.id, "name": r.name, "email": r.email}
                for r in self.recipients
            ],
        }

    @classmethod
    def _from_dict(cls, data):
        data = data or {}
        return cls(
            notify_all=bool(data.get("notify_all")),
            notify_on=data.get("notify_on") or "",
            notify_threshold=data.get("notify_threshold") or 0,
            recipients=[
                Recipient(
                    id=r.get("id") or "",
                    name=r.get("name") or "",
                    email=r.get("email") or "",
                )
                for r in data.get("recipients") or []
            ],
        )


def _copy_multimap(values):
    return {key: list(items or []) for key, items in (values or {}).items()}


@dataclass
class EnvironmentSettings:
    """The writable settings of an environment."""

    name: str = ""
    script: str = ""
    headers: dict[str, list[str]] = field(default_factory=dict)
    preserve_cookies: bool = False
    initial_variables: dict[str, str] = field(default_factory=dict)
    integrations: list[str] = field(default_factory=list)
    regions: list[str] = field(default_factory=list)
    remote_agents: list[EnvironmentRemoteAgent] = field(default_factory=list)
    retry_on_failure: bool = False
    stop_on_failure: bool = False
    verify_ssl: bool = False
    webhooks: list[str] = field(default_factory=list)
    emails: Emails = field(default_factory=Emails)
    parent_environment_id: str = ""
    client_certificate: str = ""

    def to_dict(self):
        """The request body the API expects for these settings."""
        body = {
            "name": self.name,
            "script": self.script,
            "headers": _copy_multimap(self.headers),
            "preserve_cookies": self.preserve_cookies,
            "initial_variables": dict(self.initial_variables),
            "integrations": [
                {"id": integration_id, "integration_type": "", "description": ""}
                for integration_id in self.integrations
            ]
            or None,
            "regions": list(self.regions),
            "remote_agents": [
                {"name": agent.name, "uuid": agent.uuid}
                for agent in self.remote_agents
            ]
            or None,
            "retry_on_failure": self.retry_on_failure,
            "stop_on_failure": self.stop_on_failure,
            "verify_ssl": self.verify_ssl,
            "webhooks": list(self.webhooks),
            "emails": self.emails._to_dict(),
            "client_certificate": self.client_certificate,
        }
        if self.parent_environment_id:
            body["parent_environment_id"] = self.parent_environment_id
        return body


@dataclass
class Environment(EnvironmentSettings):
    """An environment as stored by the API."""

    id: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build an environment from its API representation."""
        data = data or {}
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            script=data.get("script") or "",
            headers=_copy_multimap(data.get("headers")),
            preserve_cookies=bool(data.get("preserve_cookies")),
            initial_variables=dict(data.get("initial_variables") or {}),
            integrations=[
                item.get("id") or "" for item in data.get("integrations") or []
            ],
            regions=list(data.get("regions") or []),
            remote_agents=[
                EnvironmentRemoteAgent(
                    name=agent.get("name") or "", uuid=agent.get("uuid") or ""
                )
                for agent in data.get("remote_agents") or []
            ],
            retry_on_failure=bool(data.get("retry_on_failure")),
            stop_on_failure=bool(data.get("stop_on_failure")),
            verify_ssl=bool(data.get("verify_ssl")),
            webhooks=list(data.get("webhooks") or []),
            emails=Emails._from_dict(data.get("emails")),
            parent_environment_id=data.get("parent_environment_id") or "",
            client_certificate=data.get("client_certificate") or "",
        )


def environments_path(bucket_id, test_id=""):
    """Path of the shared environments of a bucket, or of a test's own."""
    if not test_id:
        return f"/buckets/{bucket_id}/environments"
    return f"/buckets/{bucket_id}/tests/{test_id}/environments"


def _environment_path(bucket_id, environment_id, test_id):
    return f"{environments_path(bucket_id, test_id)}/{environment_id}"


class EnvironmentClient:
    """Create, read, update and delete environments."""

    def __init__(self, transport):
        self.transport = transport

    def create(self, bucket_id, settings, test_id=""):
        """Create a shared environment, or a test environment if ``test_id``."""
        payload = self.transport.request(
            "POST", environments_path(bucket_id, test_id), settings.to_dict()
        )
        return Environment.from_dict(payload.get("data"))

    def get(self, bucket_id, environment_id, test_id=""):
        """Fetch an environment."""
        payload = self.transport.request(
            "GET", _environment_path(bucket_id, environment_id, test_id)
        )
        return Environment.from_dict(payload.get("data"))

    def update(self, bucket_id, environment_id, settings, test_id=""):
        """Replace the settings of an environment."""
        payload = self.transport.request(
            "PUT",
            _environment_path(bucket_id, environment_id, test_id),
            settings.to_dict(),
        )
        return Environment.from_dict(payload.get("data"))

    def delete(self, bucket_id, environment_id, test_id=""):
        """Delete an environment."""
        self.transport.send(
            self.transport.prepare(
                "DELETE", _environment_path(bucket_id, environment_id, test_id)
            )
        )