"""Client library for the Runscope API: account, buckets, integrations, remote agents, environments, schedules and steps."""

__version__ = "0.15.0"