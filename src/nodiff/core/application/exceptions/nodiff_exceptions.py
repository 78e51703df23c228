"""nodiff exception hierarchy.

Every fatal condition of a run is raised as one of these types so the
entrypoint can turn it into a failed status without string-matching.
"""

from typing import Any

from nodiff.core.domain.response import ActionOutputs


class NoDiffError(Exception):
    """Base exception for all nodiff errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class UnsupportedEventError(NoDiffError):
    """Raised when the triggering event is not a pull request event."""

    def __init__(self, event_name: str) -> None:
        super().__init__(
            f"Sorry, this action isn't designed for '{event_name}' events.",
            context={"event_name": event_name},
        )
        self.event_name = event_name


class ConfigurationError(NoDiffError):
    """Raised when the action inputs are malformed or incomplete."""


class DiffExecutionError(NoDiffError):
    """Raised when a git fetch/diff invocation exits non-zero."""

    def __init__(
        self,
        message: str,
        *,
        stderr: str = "",
        returncode: int | None = None,
        command: tuple[str, ...] = (),
    ) -> None:
        super().__init__(
            message,
            context={"returncode": returncode, "command": " ".join(command)},
        )
        self.stderr = stderr
        self.returncode = returncode
        self.command = command

    def __str__(self) -> str:
        if self.stderr:
            return f"{self.message}:\n{self.stderr.rstrip()}"
        return self.message


class HostingGatewayError(NoDiffError):
    """Raised when a reviewer request or review submission is rejected or unreachable.

    ``outputs`` is filled in by the workflow so the caller can still publish
    what was already computed.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.status_code = status_code
        self.outputs: ActionOutputs | None = None
