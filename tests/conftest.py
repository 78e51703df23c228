import json
from pathlib import Path
from typing import Any

import pytest

from nodiff.core.domain.pull_request import PullRequestContext
from nodiff.infrastructure.configuration.action_settings import ActionSettings


def pull_request_event_payload(author: str = "dabrady", base_ref: str = "main") -> dict[str, Any]:
    return {
        "action": "synchronize",
        "pull_request": {
            "number": 42,
            "user": {"login": author},
            "base": {"ref": base_ref, "sha": "b" * 40},
            "head": {"ref": "feature/tidy", "sha": "a" * 40},
        },
        "repository": {"name": "repo", "owner": {"login": "octo-org"}},
    }


@pytest.fixture()
def pr_context() -> PullRequestContext:
    return PullRequestContext(
        number=42,
        author="dabrady",
        owner="octo-org",
        repo="repo",
        base_ref="main",
        head_ref="feature/tidy",
        head_sha="a" * 40,
    )


@pytest.fixture()
def event_file(tmp_path: Path) -> Path:
    path = tmp_path / "event.json"
    path.write_text(json.dumps(pull_request_event_payload()), encoding="utf-8")
    return path


@pytest.fixture()
def make_settings(tmp_path: Path, event_file: Path):
    """Build ActionSettings without touching the real process environment."""

    def _make(**overrides: Any) -> ActionSettings:
        values: dict[str, Any] = {
            "event_name": "pull_request",
            "event_path": event_file,
            "output_path": tmp_path / "github_output",
            "workspace": tmp_path,
            "respond_with": "{}",
            "files_to_judge": "",
        }
        values.update(overrides)
        return ActionSettings(**values)

    return _make
