import logging
from dataclasses import dataclass

from nodiff.core.application.ports import HostingPort
from nodiff.core.application.skills.skill import BaseSkill
from nodiff.core.domain.pull_request import PullRequestContext
from nodiff.core.domain.response import ReviewKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmitReviewInput:
    pull_request: PullRequestContext
    body: str
    blocking: bool = False


class SubmitReviewSkill(BaseSkill[SubmitReviewInput, ReviewKind]):
    """Leaves the review comment, escalated to a change request when ``blocking``.

    Dismissing a blocking review is left to whoever resolves it.
    """

    def __init__(self, hosting: HostingPort) -> None:
        self._hosting = hosting

    async def execute(self, input_data: SubmitReviewInput) -> ReviewKind:
        pr = input_data.pull_request
        kind = ReviewKind.REQUEST_CHANGES if input_data.blocking else ReviewKind.COMMENT
        logger.info("[SubmitReview] Submitting %s review on %s#%d", kind, pr.full_name, pr.number)
        await self._hosting.submit_review(
            pr.owner, pr.repo, pr.number, pr.head_sha, input_data.body, kind
        )
        return kind
