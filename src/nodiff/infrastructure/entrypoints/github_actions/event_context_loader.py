import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from nodiff.core.application.exceptions import ConfigurationError, UnsupportedEventError
from nodiff.core.domain.pull_request import PullRequestContext
from nodiff.infrastructure.entrypoints.github_actions.dtos.pull_request_event_dto import (
    PullRequestEventDTO,
)

SUPPORTED_EVENT = "pull_request"


def load_pull_request_context(event_name: str, event_path: Path | None) -> PullRequestContext:
    """Read the triggering pull request from the runner's event payload file."""
    if event_name != SUPPORTED_EVENT:
        raise UnsupportedEventError(event_name or "unknown")
    if event_path is None:
        raise ConfigurationError("GITHUB_EVENT_PATH is not set; cannot read the event payload")

    try:
        payload = json.loads(event_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(
            f"Could not read the event payload at {event_path}",
            context={"error_details": str(exc)},
        ) from exc
    return pull_request_context_from_payload(payload)


def pull_request_context_from_payload(payload: dict[str, Any]) -> PullRequestContext:
    try:
        event = PullRequestEventDTO.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(
            "The event payload does not describe a pull request",
            context={"error_details": str(exc)},
        ) from exc

    pr = event.pull_request
    return PullRequestContext(
        number=pr.number,
        author=pr.user.login,
        owner=event.repository.owner.login,
        repo=event.repository.name,
        base_ref=pr.base.ref,
        head_ref=pr.head.ref,
        head_sha=pr.head.sha or "",
    )
