"""Process entrypoint for the nodiff GitHub Action."""

import asyncio
import sys
from collections.abc import Callable

from pydantic import ValidationError

from nodiff.core.application.exceptions import ConfigurationError, HostingGatewayError
from nodiff.core.application.ports import RunStatusPort
from nodiff.core.application.skills.classify.classify_meaningless_changes_skill import (
    ClassifyMeaninglessChangesSkill,
)
from nodiff.core.application.workflows.nodiff import NoDiffRequest, NoDiffWorkflow
from nodiff.core.domain.response import ActionOutputs
from nodiff.infrastructure.configuration.action_inputs_loader import ActionInputs, load_action_inputs
from nodiff.infrastructure.configuration.action_settings import ActionSettings
from nodiff.infrastructure.drivers.hosting.clients.github_http_client import GitHubHttpClient
from nodiff.infrastructure.drivers.hosting.github_hosting_adapter import GitHubHostingAdapter
from nodiff.infrastructure.drivers.vcs.git_cli_adapter import GitCliAdapter
from nodiff.infrastructure.entrypoints.github_actions.event_context_loader import (
    load_pull_request_context,
)
from nodiff.infrastructure.entrypoints.github_actions.failure_mapper import report_failure
from nodiff.infrastructure.entrypoints.github_actions.workflow_commands import (
    ActionOutputWriter,
    GitHubActionsStatusReporter,
)
from nodiff.infrastructure.observability import configure_logging, get_logger

WorkflowFactory = Callable[[ActionSettings, ActionInputs, RunStatusPort], NoDiffWorkflow]


def build_workflow(
    settings: ActionSettings, inputs: ActionInputs, status: RunStatusPort
) -> NoDiffWorkflow:
    vcs = GitCliAdapter(settings.workspace, remote=settings.remote)
    hosting = GitHubHostingAdapter(GitHubHttpClient(inputs.github_token, settings.api_url))
    return NoDiffWorkflow(
        vcs=vcs,
        hosting=hosting,
        status=status,
        classify=ClassifyMeaninglessChangesSkill(vcs, remote=settings.remote),
    )


async def run_action(
    settings: ActionSettings,
    status: RunStatusPort,
    workflow_factory: WorkflowFactory = build_workflow,
) -> ActionOutputs | None:
    """Validate the run context and inputs, then run the workflow."""
    pull_request = load_pull_request_context(settings.event_name, settings.event_path)
    inputs = load_action_inputs(settings)
    workflow = workflow_factory(settings, inputs, status)
    return await workflow.execute(
        NoDiffRequest(
            pull_request=pull_request,
            response_config=inputs.response_config,
            path_filter=inputs.path_filter,
        )
    )


def main(
    settings: ActionSettings | None = None,
    status: GitHubActionsStatusReporter | None = None,
    workflow_factory: WorkflowFactory = build_workflow,
) -> int:
    """Run the action once and return the process exit code."""
    status = status or GitHubActionsStatusReporter()
    try:
        settings = settings or ActionSettings()
    except ValidationError as exc:
        configure_logging()
        report_failure(ConfigurationError(f"Invalid action environment: {exc}"), status)
        return 1

    configure_logging(debug=settings.runner_debug, log_format=settings.log_format)
    logger = get_logger("entrypoint")
    writer = ActionOutputWriter(settings.output_path)

    try:
        outputs = asyncio.run(run_action(settings, status, workflow_factory))
    except Exception as exc:  # noqa: BLE001
        if isinstance(exc, HostingGatewayError) and exc.outputs is not None:
            writer.write(exc.outputs.to_dict())
        report_failure(exc, status, debug=settings.runner_debug)
        return 1

    if outputs is not None:
        writer.write(outputs.to_dict())
    logger.info("nodiff run finished", failed=status.failed)
    return 1 if status.failed else 0


def run() -> None:
    """Console-script entrypoint."""
    sys.exit(main())


if __name__ == "__main__":
    run()
