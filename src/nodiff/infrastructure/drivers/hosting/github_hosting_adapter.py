"""HostingPort implementation over the GitHub REST API."""

from collections.abc import Sequence
from typing import Any

import httpx
import structlog

from nodiff.core.application.exceptions import HostingGatewayError
from nodiff.core.application.ports import HostingPort
from nodiff.core.domain.response import ReviewKind
from nodiff.infrastructure.drivers.hosting.clients.github_http_client import GitHubHttpClient

logger = structlog.get_logger()


class GitHubHostingAdapter(HostingPort):
    def __init__(self, client: GitHubHttpClient) -> None:
        self.client = client

    async def request_reviewers(
        self, owner: str, repo: str, pull_number: int, reviewers: Sequence[str]
    ) -> None:
        path = f"repos/{owner}/{repo}/pulls/{pull_number}/requested_reviewers"
        await self._post(path, {"reviewers": list(reviewers)}, action="request_reviewers")
        logger.info("Reviewers requested", reviewers=list(reviewers))

    async def submit_review(
        self,
        owner: str,
        repo: str,
        pull_number: int,
        commit_sha: str,
        body: str,
        kind: ReviewKind,
    ) -> None:
        path = f"repos/{owner}/{repo}/pulls/{pull_number}/reviews"
        payload: dict[str, Any] = {"body": body, "event": kind.value}
        if commit_sha:
            payload["commit_id"] = commit_sha
        await self._post(path, payload, action="submit_review")
        logger.info("Review submitted", review_kind=kind.value)

    async def _post(self, path: str, payload: dict[str, Any], action: str) -> httpx.Response:
        try:
            response = await self.client.post(path, payload)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise HostingGatewayError(
                f"GitHub rejected {action} with HTTP {status}: {_error_message(e.response)}",
                status_code=status,
                context={"action": action, "path": path},
            ) from e
        except httpx.HTTPError as e:
            raise HostingGatewayError(
                f"GitHub {action} failed: {type(e).__name__}: {e}",
                context={"action": action, "path": path},
            ) from e


def _error_message(response: httpx.Response) -> str:
    """GitHub error bodies carry a ``message``; fall back to the raw text."""
    try:
        data = response.json()
    except ValueError:
        return response.text
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.text
