"""Service discovery entries, state machines, state triggers and diagnostic types for automotive middleware."""

__version__ = "0.1.0"