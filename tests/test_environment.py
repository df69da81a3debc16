import json
from dataclasses import fields

import pytest
import responses

from runscope.environment import (
    Emails,
    Environment,
    EnvironmentClient,
    EnvironmentRemoteAgent,
    EnvironmentSettings,
    Recipient,
    environments_path,
)
from runscope.errors import ApiError
from runscope.transport import Transport

ENDPOINT = "https://api.runscope.com"


def _client():
    return EnvironmentClient(Transport(token="token", endpoint=ENDPOINT))


def _settings():
    return EnvironmentSettings(
        name="staging",
        script="var a = 1;",
        headers={"Accept": ["application/json", "text/plain"]},
        preserve_cookies=True,
        initial_variables={"base_url": "https://api.example.com"},
        integrations=["i1", "i2"],
        regions=["us1"],
        remote_agents=[EnvironmentRemoteAgent(name="agent", uuid="a1")],
        retry_on_failure=True,
        stop_on_failure=False,
        verify_ssl=True,
        webhooks=["https://hooks.example.com/x"],
        emails=Emails(
            notify_all=True,
            notify_on="all",
            notify_threshold=1,
            recipients=[Recipient(id="r1", name="Ann", email="ann@example.com")],
        ),
        parent_environment_id="p1",
        client_certificate="cert",
    )


def _as_environment(settings, environment_id):
    values = {f.name: getattr(settings, f.name) for f in fields(settings)}
    return Environment(id=environment_id, **values)


def test_environments_path_shared():
    assert environments_path("b1") == "/buckets/b1/environments"


def test_environments_path_test():
    assert environments_path("b1", "t1") == "/buckets/b1/tests/t1/environments"


def test_emails_default():
    assert Emails().is_default()


@pytest.mark.parametrize(
    "emails",
    [
        Emails(notify_all=True),
        Emails(notify_on="all"),
        Emails(notify_threshold=1),
        Emails(recipients=[Recipient(id="r1")]),
    ],
)
def test_emails_not_default(emails):
    assert not emails.is_default()


def test_to_dict_round_trips_through_from_dict():
    settings = _settings()
    body = settings.to_dict()
    body["id"] = "e1"
    assert Environment.from_dict(body) == _as_environment(settings, "e1")


def test_to_dict_omits_empty_parent_and_nulls_empty_lists():
    body = EnvironmentSettings(name="x").to_dict()
    assert "parent_environment_id" not in body
    assert body["integrations"] is None
    assert body["remote_agents"] is None
    assert body["emails"]["recipients"] == []


def test_to_dict_integration_entries():
    body = _settings().to_dict()
    assert body["integrations"][0] == {
        "id": "i1",
        "integration_type": "",
        "description": "",
    }
    assert body["parent_environment_id"] == "p1"


def test_to_dict_copies_headers():
    settings = _settings()
    body = settings.to_dict()
    body["headers"]["Accept"].append("extra")
    assert settings.headers["Accept"] == ["application/json", "text/plain"]


def test_from_dict_handles_nulls():
    environment = Environment.from_dict(
        {
            "id": "a50b63cc-c377-4823-9a95-8b91f12326f2",
            "name": "Test Settings",
            "parent_environment_id": None,
            "webhooks": None,
            "remote_agents": [],
            "integrations": [
                {
                    "description": "Pagerduty Account",
                    "integration_type": "pagerduty",
                    "id": "53776d9a-4f34-4f1f-9gff-c155dfb6692e",
                }
            ],
            "regions": ["us1"],
            "emails": {"notify_on": "all", "notify_threshold": 1, "recipients": []},
        }
    )
    assert environment.parent_environment_id == ""
    assert environment.webhooks == []
    assert environment.integrations == ["53776d9a-4f34-4f1f-9gff-c155dfb6692e"]
    assert environment.emails.notify_on == "all"
    assert environment.headers == {}


def test_create_posts_to_test_path():
    settings = _settings()
    reply = dict(settings.to_dict(), id="e1")
    url = f"{ENDPOINT}/buckets/b1/tests/t1/environments"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, url, json={"data": reply})
        environment = _client().create("b1", settings, test_id="t1")
        sent = json.loads(rsps.calls[0].request.body)
    assert sent == settings.to_dict()
    assert environment == _as_environment(settings, "e1")


def test_get_shared_environment():
    url = f"{ENDPOINT}/buckets/b1/environments/e1"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, url, json={"data": {"id": "e1", "name": "shared"}})
        environment = _client().get("b1", "e1")
    assert environment.id == "e1"
    assert environment.name == "shared"


def test_update_puts_settings():
    settings = EnvironmentSettings(name="renamed")
    url = f"{ENDPOINT}/buckets/b1/environments/e1"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.PUT, url, json={"data": {"id": "e1", "name": "renamed"}})
        environment = _client().update("b1", "e1", settings)
        sent = json.loads(rsps.calls[0].request.body)
    assert sent["name"] == "renamed"
    assert environment.name == "renamed"


def test_delete_issues_delete():
    url = f"{ENDPOINT}/buckets/b1/tests/t1/environments/e1"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.DELETE, url, status=204)
        result = _client().delete("b1", "e1", test_id="t1")
        sent = rsps.calls[0].request
    assert result is None
    assert sent.method == "DELETE"
    assert sent.url == url


def test_get_error_raises_api_error():
    url = f"{ENDPOINT}/buckets/b1/environments/e1"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, url, status=403, json={"error": {"status": 403}})
        with pytest.raises(ApiError) as info:
            _client().get("b1", "e1")
    assert info.value.status() == 403