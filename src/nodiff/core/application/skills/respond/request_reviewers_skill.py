import logging
from dataclasses import dataclass

from nodiff.core.application.ports import HostingPort
from nodiff.core.application.skills.respond.reviewer_selection import select_reviewers
from nodiff.core.application.skills.skill import BaseSkill
from nodiff.core.domain.pull_request import PullRequestContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestReviewersInput:
    pull_request: PullRequestContext
    handles: tuple[str, ...]


class RequestReviewersSkill(BaseSkill[RequestReviewersInput, list[str]]):
    """Requests reviews from the configured handles, never from the PR author.

    Returns the handles that were actually requested.
    """

    def __init__(self, hosting: HostingPort) -> None:
        self._hosting = hosting

    async def execute(self, input_data: RequestReviewersInput) -> list[str]:
        pr = input_data.pull_request
        reviewers = select_reviewers(input_data.handles, pr.author)
        if not reviewers:
            logger.info("[RequestReviewers] Only the author was listed; nothing to request")
            return []

        logger.info("[RequestReviewers] Requesting reviews from: %s", ", ".join(reviewers))
        await self._hosting.request_reviewers(pr.owner, pr.repo, pr.number, reviewers)
        return reviewers
