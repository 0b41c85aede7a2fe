"""Readiness interests, events and registrable I/O sources for event loops."""

__version__ = "0.1.0"
__all__ = ["event", "interest", "io_source"]