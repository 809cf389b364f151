"""Top-level package for demosdesk.

This package hosts the desktop shell's bridge to the `demostools` toolkit:
deterministic discovery of the toolkit script across install layouts and
invocation of its sub-commands. The main entry points are
`ExecutableResolver` and `ToolInvoker`.
"""

from .invoker import ToolInvoker
from .runtime_tools import ExecutableResolver, resolve_tool_path

__all__ = ["ExecutableResolver", "ToolInvoker", "__version__", "resolve_tool_path"]

__version__ = "0.1.0"
