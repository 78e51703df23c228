from abc import ABC, abstractmethod
from collections.abc import Sequence

from nodiff.core.domain.response import ReviewKind


class HostingPort(ABC):
    """Pull request reactions on the code hosting platform."""

    @abstractmethod
    async def request_reviewers(
        self, owner: str, repo: str, pull_number: int, reviewers: Sequence[str]
    ) -> None:
        """Ask the given handles to review the pull request."""

    @abstractmethod
    async def submit_review(
        self,
        owner: str,
        repo: str,
        pull_number: int,
        commit_sha: str,
        body: str,
        kind: ReviewKind,
    ) -> None:
        """Submit a review of the given kind on the pull request."""
