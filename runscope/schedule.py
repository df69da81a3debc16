"""Schedules that run a test periodically against an environment."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Schedule:
    """A test schedule as reported by the API."""

    environment_id: str = ""
    interval: str = ""
    note: str = ""
    id: str = ""

    @classmethod
    def from_dict(cls, data):
        """Build a schedule from its API representation."""
        data = data or {}
        return cls(
            environment_id=data.get("environment_id") or "",
            interval=data.get("interval") or "",
            note=data.get("note") or "",
            id=data.get("id") or "",
        )


def schedules_path(bucket_id, test_id):
    """Path of the schedules collection of a test."""
    return f"/buckets/{bucket_id}/tests/{test_id}/schedules"


def _schedule_path(bucket_id, test_id, schedule_id):
    return f"{schedules_path(bucket_id, test_id)}/{schedule_id}"


def _schedule_body(environment_id, interval, note):
    return {
        "environment_id": environment_id,
        "interval": interval,
        "note": note,
    }


class ScheduleClient:
    """Create, read, update and delete test schedules."""

    def __init__(self, transport):
        self.transport = transport

    def create(self, bucket_id, test_id, environment_id, interval, note=""):
        """Schedule a test to run against an environment at an interval."""
        payload = self.transport.request(
            "POST",
            schedules_path(bucket_id, test_id),
            _schedule_body(environment_id, interval, note),
        )
        return Schedule.from_dict(payload.get("data"))

    def get(self, bucket_id, test_id, schedule_id):
        """Fetch a schedule of a test."""
        payload = self.transport.request(
            "GET", _schedule_path(bucket_id, test_id, schedule_id)
        )
        return Schedule.from_dict(payload.get("data"))

    def update(
        self, bucket_id, test_id, schedule_id, environment_id, interval, note=""
    ):
        """Replace the settings of a schedule."""
        payload = self.transport.request(
            "PUT",
            _schedule_path(bucket_id, test_id, schedule_id),
            _schedule_body(environment_id, interval, note),
        )
        return Schedule.from_dict(payload.get("data"))

    def delete(self, bucket_id, test_id, schedule_id):
        """Delete a schedule of a test."""
        self.transport.send(
            self.transport.prepare(
                "DELETE", _schedule_path(bucket_id, test_id, schedule_id)
            )
        )