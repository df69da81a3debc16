"""Test steps: HTTP requests and subtests that make up a test."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from runscope.errors import RunscopeError

logger = logging.getLogger(__name__)

REQUEST_STEP = "request"
SUBTEST_STEP = "subtest"


def _text(value):
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _copy_multimap(values):
    return {key: list(items or []) for key, items in (values or {}).items()}


@dataclass
class StepVariable:
    """A variable extracted from a step's response."""

    name: str = ""
    property: str = ""
    source: str = ""

    def _to_dict(self):
        return {"name": self.name, "property": self.property, "source": self.source}

    @classmethod
    def _from_dict(cls, data):
        data = data or {}
        return cls(
            name=_text(data.get("name")),
            property=_text(data.get("property")),
            source=_text(data.get("source")),
        )


@dataclass
class StepAssertion:
    """A check made against a step's response."""

    source: str = ""
    property: str = ""
    comparison: str = ""
    value: str = ""

    def _to_dict(self):
        return {
            "source": self.source,
            "property": self.property,
            "comparison": self.comparison,
            "value": self.value,
        }

    @classmethod
    def _from_dict(cls, data):
        data = data or {}
        return cls(
            source=_text(data.get("source")),
            property=_text(data.get("property")),
            comparison=_text(data.get("comparison")),
            value=_text(data.get("value")),
        )


@dataclass
class StepAuth:
    """Credentials a request step authenticates with."""

    username: str = ""
    password: str = ""
    auth_type: str = ""

    def is_empty(self):
        """Whether no credential field is set."""
        return not (self.username or self.password or self.auth_type)

    def _to_dict(self):
        body = {}
        if self.username:
            body["username"] = self.username
        if self.password:
            body["password"] = self.password
        if self.auth_type:
            body["auth_type"] = self.auth_type
        return body

    @classmethod
    def _from_dict(cls, data):
        data = data or {}
        return cls(
            username=_text(data.get("username")),
            password=_text(data.get("password")),
            auth_type=_text(data.get("auth_type")),
        )


@dataclass
class StepRequest:
    """A step that sends one HTTP request."""

    id: str = ""
    step_type: str = REQUEST_STEP
    method: str = ""
    url: str = ""
    variables: list[StepVariable] = field(default_factory=list)
    assertions: list[StepAssertion] = field(default_factory=list)
    headers: dict[str, list[str]] = field(default_factory=dict)
    auth: StepAuth = field(default_factory=StepAuth)
    body: str = ""
    form: dict[str, list[str]] = field(default_factory=dict)
    scripts: list[str] = field(default_factory=list)
    before_scripts: list[str] = field(default_factory=list)
    note: str = ""
    skipped: bool = False

    @classmethod
    def from_dict(cls, data):
        """Build a request step from its API representation."""
        data = data or {}
        return cls(
            id=_text(data.get("id")),
            step_type=_text(data.get("step_type")),
            method=_text(data.get("method")),
            url=_text(data.get("url")),
            variables=[StepVariable._from_dict(v) for v in data.get("variables") or []],
            assertions=[
                StepAssertion._from_dict(a) for a in data.get("assertions") or []
            ],
            headers=_copy_multimap(data.get("headers")),
            auth=StepAuth._from_dict(data.get("auth")),
            body=_text(data.get("body")),
            form=_copy_multimap(data.get("form")),
            scripts=list(data.get("scripts") or []),
            before_scripts=list(data.get("before_scripts") or []),
            note=_text(data.get("note")),
            skipped=bool(data.get("skipped")),
        )

    def to_dict(self):
        """The request body the API expects for this step."""
        return {
            "id": self.id,
            "step_type": REQUEST_STEP,
            "method": self.method,
            "url": self.url,
            "variables": [v._to_dict() for v in self.variables],
            "assertions": [a._to_dict() for a in self.assertions],
            "headers": _copy_multimap(self.headers),
            "auth": self.auth._to_dict(),
            "body": self.body,
            "form": _copy_multimap(self.form),
            "scripts": list(self.scripts),
            "before_scripts": list(self.before_scripts),
            "note": self.note,
            "skipped": self.skipped,
        }


@dataclass
class StepSubtest:
    """A step that runs another test."""

    id: str = ""
    bucket_key: str = ""
    test_uuid: str = ""
    environment_uuid: str = ""
    use_parent_environment: bool = False
    variables: list[StepVariable] = field(default_factory=list)
    assertions: list[StepAssertion] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        """Build a subtest step from its API representation."""
        data = data or {}
        return cls(
            id=_text(data.get("id")),
            bucket_key=_text(data.get("bucket_key")),
            test_uuid=_text(data.get("test_uuid")),
            environment_uuid=_text(data.get("environment_uuid")),
            use_parent_environment=bool(data.get("use_parent_environment")),
            variables=[StepVariable._from_dict(v) for v in data.get("variables") or []],
            assertions=[
                StepAssertion._from_dict(a) for a in data.get("assertions") or []
            ],
        )

    def to_dict(self):
        """The request body the API expects for this step."""
        return {
            "id": self.id,
            "step_type": SUBTEST_STEP,
            "test_uuid": self.test_uuid,
            "environment_uuid": self.environment_uuid,
            "bucket_key": self.bucket_key,
            "use_parent_environment": self.use_parent_environment,
            "variables": [v._to_dict() for v in self.variables],
            "assertions": [a._to_dict() for a in self.assertions],
        }


def steps_path(bucket_id, test_id):
    """Path of the steps collection of a test."""
    return f"/buckets/{bucket_id}/tests/{test_id}/steps"


def _step_path(bucket_id, test_id, step_id):
    return f"{steps_path(bucket_id, test_id)}/{step_id}"


def _last_step(payload):
    steps = payload.get("data") or []
    if not steps:
        raise RunscopeError("no steps returned after created")
    return steps[-1]


class StepClient:
    """Create, read, update and delete the steps of a test."""

    def __init__(self, transport):
        self.transport = transport

    def create_request(self, bucket_id, test_id, step):
        """Append a request step to a test and return it as created."""
        body = step.to_dict()
        body["id"] = ""
        payload = self.transport.request("POST", steps_path(bucket_id, test_id), body)
        return StepRequest.from_dict(_last_step(payload))

    def get_request(self, bucket_id, test_id, step_id):
        """Fetch a request step."""
        payload = self.transport.request("GET", _step_path(bucket_id, test_id, step_id))
        return StepRequest.from_dict(payload.get("data"))

    def update_request(self, bucket_id, test_id, step_id, step):
        """Replace a request step."""
        path = _step_path(bucket_id, test_id, step_id)
        body = step.to_dict()
        body["id"] = step_id
        logger.info("calling with PUT url=%s body=%s", path, body)
        payload = self.transport.request("PUT", path, body)
        return StepRequest.from_dict(payload.get("data"))

    def create_subtest(self, bucket_id, test_id, step):
        """Append a subtest step to a test and return it as created."""
        body = step.to_dict()
        body["id"] = ""
        payload = self.transport.request("POST", steps_path(bucket_id, test_id), body)
        return StepSubtest.from_dict(_last_step(payload))

    def get_subtest(self, bucket_id, test_id, step_id):
        """Fetch a subtest step."""
        payload = self.transport.request("GET", _step_path(bucket_id, test_id, step_id))
        return StepSubtest.from_dict(payload.get("data"))

    def update_subtest(self, bucket_id, test_id, step_id, step):
        """Replace a subtest step."""
        body = step.to_dict()
        body["id"] = step_id
        payload = self.transport.request(
            "PUT", _step_path(bucket_id, test_id, step_id), body
        )
        return StepSubtest.from_dict(payload.get("data"))

    def delete(self, bucket_id, test_id, step_id):
        """Delete a step of a test."""
        self.transport.send(
            self.transport.prepare("DELETE", _step_path(bucket_id, test_id, step_id))
        )