"""Readiness interests, events, event sources and an I/O source adapter."""

__version__ = "0.1.0"

__all__ = ["event", "events", "interest", "io_source", "source"]