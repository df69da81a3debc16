# runscope

A small Python client for the Runscope API. It covers the account, buckets,
team integrations, remote agents, environments, schedules and test steps
(both request steps and subtest steps).

## Installation

Install from a checkout of the project:

    pip install .

To work on it and run the tests:

    pip install .[test]
    pytest

## Usage

Everything goes through `runscope.client.Client`, which holds one client per
area of the API as the attributes `account`, `bucket`, `integration`,
`remote_agent`, `environment`, `schedule` and `step`. All of them share one
`runscope.transport.Transport`. Give the client an API token; the endpoint
defaults to `https://api.runscope.com`, and any trailing slash on a custom
endpoint is dropped. A `requests.Session` may be passed as `session`.

```python
from runscope.client import Client

client = Client(token="token")

account = client.account.get()
print(account.name, [team.name for team in account.teams])

bucket = client.bucket.create("my bucket", account.teams[0].uuid)
for b in client.bucket.list():
    print(b.key, b.name)

for integration in client.integration.list(account.teams[0].uuid):
    print(integration.type, integration.description)

for agent in client.remote_agent.list(account.teams[0].uuid):
    print(agent.id, agent.name, agent.version)

client.bucket.delete(bucket.key)
```

Every request carries the header `Authorization: Bearer <token>`; requests
with a body send it as JSON.

### Environments

```python
from runscope.environment import EnvironmentSettings

settings = EnvironmentSettings(
    name="staging",
    initial_variables={"base_url": "https://api.example.com"},
    regions=["us1"],
    verify_ssl=True,
)

shared = client.environment.create(bucket.key, settings)
per_test = client.environment.create(bucket.key, settings, test_id="test-id")
client.environment.update(bucket.key, shared.id, settings)
client.environment.delete(bucket.key, per_test.id, test_id="test-id")
```

Pass a `test_id` to work with a test's own environments; leave it out for the
bucket's shared environments. `Emails.is_default()` tells whether the e-mail
notification settings are all unset.

### Schedules

```python
schedule = client.schedule.create(bucket.key, "test-id", shared.id, "1h", "hourly run")
client.schedule.update(bucket.key, "test-id", schedule.id, shared.id, "1d")
client.schedule.delete(bucket.key, "test-id", schedule.id)
```

### Steps

```python
from runscope.steps import StepAssertion, StepRequest

step = StepRequest(
    method="GET",
    url="https://api.example.com/health",
    assertions=[StepAssertion(source="response_status", comparison="equal_number", value="200")],
)
created = client.step.create_request(bucket.key, "test-id", step)
fetched = client.step.get_request(bucket.key, "test-id", created.id)
client.step.delete(bucket.key, "test-id", created.id)
```

Creating a step returns the last step in the test's step list as the API
reports it. Subtest steps work the same way with `runscope.steps.StepSubtest`
and the `create_subtest`, `get_subtest` and `update_subtest` methods.

## Errors

Every failure raises `runscope.errors.RunscopeError` or a subclass of it:

- `ApiError` for responses with status 400 or above. Its `status()` is the
  status reported in the response body, falling back to the HTTP status code,
  and `str()` gives `"<status> <message>"`, the message falling back to the
  HTTP reason, for example
  `403 You must provide a valid Authorization header to use the Runscope API.`
- `TransportError` when the HTTP request could not be carried out.
- `DecodeError` when a successful response is not valid JSON.
- `RunscopeError` itself when creating a step returns no steps.

## What this package does not do

It does not create, read, update or delete tests themselves; tests are only
referred to by id when working with their environments, schedules and steps.
It has no command-line tool.