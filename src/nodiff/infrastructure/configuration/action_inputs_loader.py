from dataclasses import dataclass

from nodiff.core.application.exceptions import ConfigurationError
from nodiff.core.domain.change import parse_path_filter
from nodiff.core.domain.response import ResponseConfig
from nodiff.infrastructure.configuration.action_settings import ActionSettings
from nodiff.infrastructure.configuration.response_config_parser import parse_response_config


@dataclass(frozen=True)
class ActionInputs:
    response_config: ResponseConfig
    path_filter: tuple[str, ...]
    github_token: str


def load_action_inputs(settings: ActionSettings) -> ActionInputs:
    """Validate the action inputs once, before any git or API work starts."""
    response_config = parse_response_config(settings.respond_with)
    token = settings.github_token.get_secret_value() if settings.github_token else ""
    if response_config.needs_hosting_access and not token:
        raise ConfigurationError(
            "`github-token` is required when `requestReviewers` or `comment` is configured",
        )
    return ActionInputs(
        response_config=response_config,
        path_filter=parse_path_filter(settings.files_to_judge),
        github_token=token,
    )
