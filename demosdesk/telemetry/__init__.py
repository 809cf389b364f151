"""Run-event logging for deterministic auditing of resolution and invocation."""

from .logger import RunLogger

__all__ = ["RunLogger"]
