"""Entry point bundling every Runscope API client behind one transport."""

from __future__ import annotations

from runscope.account import AccountClient
from runscope.bucket import BucketClient
from runscope.environment import EnvironmentClient
from runscope.integration import IntegrationClient
from runscope.remote_agent import RemoteAgentClient
from runscope.schedule import ScheduleClient
from runscope.steps import StepClient
from runscope.transport import DEFAULT_ENDPOINT, Transport


class Client:
    """Access to the Runscope API with one token and endpoint.

    Every resource client shares the same transport, so they all send the
    same Authorization header to the same endpoint.
    """

    def __init__(self, token="", endpoint=DEFAULT_ENDPOINT, session=None):
        self.transport = Transport(token=token, endpoint=endpoint, session=session)
        self.environment = EnvironmentClient(self.transport)
        self.bucket = BucketClient(self.transport)
        self.integration = IntegrationClient(self.transport)
        self.schedule = ScheduleClient(self.transport)
        self.step = StepClient(self.transport)
        self.remote_agent = RemoteAgentClient(self.transport)
        self.account = AccountClient(self.transport)

    @property
    def endpoint(self):
        """The base URL requests are sent to, without a trailing slash."""
        return self.transport.endpoint