"""Exceptions raised by the Runscope API client."""

from __future__ import annotations

import json


class RunscopeError(Exception):
    """Base class for every error the client raises."""


class TransportError(RunscopeError):
    """The HTTP request could not be carried out."""


class DecodeError(RunscopeError):
    """A response body could not be decoded as JSON."""


class ApiError(RunscopeError):
    """The API answered with an error status code."""

    def __init__(self, status_code, reason, status, message):
        super().__init__(status_code, reason, status, message)
        self.status_code = status_code
        self.reason = reason
        self.error_status = status
        self.message = message

    def status(self):
        """The status reported in the error body, else the HTTP status code."""
        if self.error_status:
            return self.error_status
        return self.status_code

    def __str__(self):
        message = self.message or self.reason
        return f"{self.status()} {message}"


def error_from_body(status_code, reason, body):
    """Build an ApiError from an HTTP status and the raw response body.

    A body that is not JSON, or carries no error object, still yields an
    error built from the HTTP status alone.
    """
    status = 0
    message = ""
    try:
        payload = json.loads(body) if body else None
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            raw_status = error.get("status")
            if isinstance(raw_status, int) and not isinstance(raw_status, bool):
                status = raw_status
            raw_message = error.get("message")
            if isinstance(raw_message, str):
                message = raw_message

    return ApiError(status_code, reason, status, message)