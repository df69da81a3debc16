"""HTTP transport shared by all Runscope API clients."""

from __future__ import annotations

import json

import requests

from runscope.errors import DecodeError, TransportError, error_from_body

DEFAULT_ENDPOINT = "https://api.runscope.com"


class Transport:
    """Builds authorised requests against the API and sends them."""

    def __init__(self, token="", endpoint=DEFAULT_ENDPOINT, session=None):
        self.token = token
        self.endpoint = endpoint.rstrip("/")
        self.session = session if session is not None else requests.Session()

    def prepare(self, method, path, body=None):
        """Prepare a request for ``path``, with ``body`` sent as JSON if given."""
        headers = {"Authorization": f"Bearer {self.token}"}
        data = None
        if body is not None:
            data = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = "application/json"
        return requests.Request(
            method, self.endpoint + path, headers=headers, data=data
        ).prepare()

    def send(self, request):
        """Send a prepared request and return the raw response body.

        Raises TransportError when the request fails and ApiError when the
        API answers with a status code of 400 or above.
        """
        try:
            response = self.session.send(request)
        except requests.RequestException as exc:
            raise TransportError(f"failed to do: {exc}") from exc

        if response.status_code >= 400:
            raise error_from_body(
                response.status_code, response.reason, response.content
            )
        return response.content

    def request(self, method, path, body=None):
        """Send a request and return the decoded JSON response."""
        content = self.send(self.prepare(method, path, body))
        try:
            return json.loads(content)
        except ValueError as exc:
            raise DecodeError(f"failed to unmarshal json: {exc}") from exc