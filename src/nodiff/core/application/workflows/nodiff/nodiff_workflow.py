"""Deterministic pipeline that reacts to meaningless pull request changes."""

import structlog
from structlog.contextvars import bind_contextvars

from nodiff.core.application.exceptions import HostingGatewayError
from nodiff.core.application.ports import HostingPort, RunStatusPort, VcsPort
from nodiff.core.application.skills.classify.classify_meaningless_changes_skill import (
    ClassifyChangesInput,
    ClassifyMeaninglessChangesSkill,
)
from nodiff.core.application.skills.respond.message_templates import (
    build_failure_message,
    hydrate_template,
)
from nodiff.core.application.skills.respond.request_reviewers_skill import (
    RequestReviewersInput,
    RequestReviewersSkill,
)
from nodiff.core.application.skills.respond.submit_review_skill import (
    SubmitReviewInput,
    SubmitReviewSkill,
)
from nodiff.core.application.workflows.base_workflow import BaseWorkflow
from nodiff.core.application.workflows.nodiff.nodiff_request import NoDiffRequest
from nodiff.core.domain.change import ChangeSet
from nodiff.core.domain.response import ActionOutputs

logger = structlog.get_logger()


class NoDiffWorkflow(BaseWorkflow[NoDiffRequest, ActionOutputs | None]):
    """Fetch -> Classify -> Outputs -> Messages -> React.

    Reactions run one at a time in a fixed order: reviewer request, then the
    review, then the failure status. A hosting failure stops the remaining
    reactions; the outputs computed so far travel on the raised error.
    """

    def __init__(
        self,
        vcs: VcsPort,
        hosting: HostingPort,
        status: RunStatusPort,
        classify: ClassifyMeaninglessChangesSkill | None = None,
        request_reviewers: RequestReviewersSkill | None = None,
        submit_review: SubmitReviewSkill | None = None,
    ) -> None:
        self._vcs = vcs
        self._status = status
        self._classify = classify or ClassifyMeaninglessChangesSkill(vcs)
        self._request_reviewers = request_reviewers or RequestReviewersSkill(hosting)
        self._submit_review = submit_review or SubmitReviewSkill(hosting)

    async def execute(self, request: NoDiffRequest) -> ActionOutputs | None:
        pr = request.pull_request
        bind_contextvars(pull_number=pr.number, repository=pr.full_name)
        logger.info("nodiff workflow started", base_ref=request.base_ref)

        await self._step_1_fetch(request)
        meaningless = await self._step_2_classify(request)
        if meaningless.is_empty():
            logger.info("No meaningless changes found", processing_status="CLEAN")
            return None

        outputs = self._step_3_compute_outputs(meaningless)
        comment, failure_message = self._step_4_build_messages(request, outputs)
        try:
            await self._step_5_react(request, comment, failure_message)
        except HostingGatewayError as exc:
            exc.outputs = outputs
            logger.error(
                "Reaction failed, remaining reactions skipped",
                error_type=type(exc).__name__,
                error_details=str(exc),
                status_code=exc.status_code,
            )
            raise

        logger.info("nodiff workflow completed", meaningless_files=len(meaningless))
        return outputs

    # ── Step Methods ─────────────────────────────────────────────────

    async def _step_1_fetch(self, request: NoDiffRequest) -> None:
        logger.info("Step 1: Fetching base ref", base_ref=request.base_ref)
        await self._vcs.fetch_ref(request.base_ref)

    async def _step_2_classify(self, request: NoDiffRequest) -> ChangeSet:
        logger.info("Step 2: Classifying changes", path_filter=list(request.path_filter))
        return await self._classify.execute(
            ClassifyChangesInput(base_ref=request.base_ref, path_filter=request.path_filter)
        )

    @staticmethod
    def _step_3_compute_outputs(meaningless: ChangeSet) -> ActionOutputs:
        outputs = ActionOutputs.from_change_set(meaningless)
        logger.info("Step 3: Meaningless changes found", files=outputs.files)
        return outputs

    @staticmethod
    def _step_4_build_messages(
        request: NoDiffRequest, outputs: ActionOutputs
    ) -> tuple[str | None, str]:
        variables = outputs.to_dict()
        config = request.response_config
        comment = hydrate_template(config.comment, variables) if config.wants_comment else None
        return comment, build_failure_message(variables)

    async def _step_5_react(
        self, request: NoDiffRequest, comment: str | None, failure_message: str
    ) -> None:
        config = request.response_config
        pr = request.pull_request
        if config.wants_reviewers:
            await self._request_reviewers.execute(
                RequestReviewersInput(pull_request=pr, handles=config.request_reviewers)
            )
        if comment is not None:
            await self._submit_review.execute(
                SubmitReviewInput(pull_request=pr, body=comment, blocking=config.wants_failure)
            )
        if config.wants_failure:
            self._status.set_failed(failure_message)
        else:
            self._status.warn(failure_message)
