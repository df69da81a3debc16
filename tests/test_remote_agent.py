import pytest
import responses

from runscope.errors import ApiError
from runscope.remote_agent import RemoteAgent, RemoteAgentClient
from runscope.transport import Transport

ENDPOINT = "https://api.example.com"

AGENTS = [
    {"agent_id": "agent-one", "name": "office", "version": "1.2.0"},
    {"agent_id": "agent-two", "name": "lab", "version": None},
]


def _client():
    return RemoteAgentClient(Transport(token="token", endpoint=ENDPOINT))


def test_from_dict_reads_agent_id():
    agent = RemoteAgent.from_dict(AGENTS[0])
    assert agent == RemoteAgent(id="agent-one", name="office", version="1.2.0")


def test_from_dict_null_version():
    assert RemoteAgent.from_dict(AGENTS[1]).version == ""


def test_list_agents():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET, ENDPOINT + "/teams/team-1/agents", json={"data": AGENTS}
        )
        agents = _client().list("team-1")
        auth = rsps.calls[0].request.headers["Authorization"]
    assert [a.id for a in agents] == ["agent-one", "agent-two"]
    assert [a.name for a in agents] == ["office", "lab"]
    assert auth == "Bearer token"


def test_list_agents_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, ENDPOINT + "/teams/team-1/agents", status=403)
        with pytest.raises(ApiError) as info:
            _client().list("team-1")
    assert info.value.status() == 403