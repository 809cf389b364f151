"""Shared typed data models for demosdesk.

This package contains dataclasses used across resolver, invoker, and CLI
modules to avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    Candidate,
    ConfigurationStatus,
    Found,
    NotFound,
    PlatformContext,
    ResolverSettings,
    SearchOutcome,
    ToolArgument,
    ToolDefinition,
)

__all__ = [
    "Candidate",
    "ConfigurationStatus",
    "Found",
    "NotFound",
    "PlatformContext",
    "ResolverSettings",
    "SearchOutcome",
    "ToolArgument",
    "ToolDefinition",
]
