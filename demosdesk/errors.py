"""Domain exceptions for tool discovery, invocation, and CLI diagnostics."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.datatypes import NotFound


class DemosdeskError(RuntimeError):
    """Raised when a specific desktop-shell stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class ResolutionFailed(DemosdeskError):
    """Raised when no candidate location holds the toolkit script.

    The detail is the full multi-line diagnostic rendered from the outcome, so
    it always reflects exactly the locations that were checked.
    """

    def __init__(self, outcome: NotFound, diagnostic: str) -> None:
        super().__init__(
            stage="resolve",
            detail=diagnostic,
            hint="Install the toolkit in one of the checked locations or put its launcher on PATH.",
        )
        self.outcome = outcome


class InvocationFailed(DemosdeskError):
    """Raised when the resolved tool could not be launched or exited non-zero."""

    def __init__(
        self,
        *,
        command: str,
        detail: str,
        exit_code: int | None = None,
    ) -> None:
        super().__init__(stage="invoke", detail=detail)
        self.command = command
        self.exit_code = exit_code
