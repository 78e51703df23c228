import json

import structlog
from pydantic import ValidationError

from nodiff.core.application.exceptions import ConfigurationError
from nodiff.core.domain.response import ResponseConfig

logger = structlog.get_logger()

KNOWN_KEYS = {"requestReviewers", "comment", "fail"}


def parse_response_config(raw: str | None) -> ResponseConfig:
    """Parse the ``respond-with`` input. An empty input means "no reactions"."""
    if raw is None or not raw.strip():
        return ResponseConfig()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(
            "`respond-with` must be valid JSON, please correct your workflow config",
            context={"error_details": str(exc)},
        ) from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            "`respond-with` must be a JSON object, please correct your workflow config",
            context={"received_type": type(data).__name__},
        )

    unknown = sorted(set(data) - KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown `respond-with` options", options=unknown)

    try:
        return ResponseConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"`respond-with` has invalid options: {_summarize(exc)}",
            context={"error_details": str(exc)},
        ) from exc


def _summarize(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error["loc"])
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
