"""Single-owner day schedule manager with conflict detection and crew notifications."""

__version__ = "0.1.0"
