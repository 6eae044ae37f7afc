"""Agent data, function registry, built-in tools, a job queue and event delivery."""

__version__ = "2.0.0"