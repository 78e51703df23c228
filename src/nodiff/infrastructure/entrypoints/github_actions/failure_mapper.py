import structlog

from nodiff.core.application.exceptions import NoDiffError
from nodiff.core.application.ports import RunStatusPort
from nodiff.infrastructure.observability.redaction_service import redact_text

logger = structlog.get_logger()


def describe_failure(error: BaseException) -> str:
    """Human-readable, secret-free failure text for any error a run can raise."""
    if isinstance(error, NoDiffError):
        message = str(error)
    else:
        message = f"Unexpected error: {type(error).__name__}: {error}"
    return redact_text(message)


def report_failure(error: BaseException, status: RunStatusPort, debug: bool = False) -> None:
    """The one place where errors become a failed run status."""
    message = describe_failure(error)
    log_fields = {
        "processing_status": "ERROR",
        "error_type": type(error).__name__,
        "error_details": message,
    }
    if isinstance(error, NoDiffError) and error.context:
        log_fields["error_context"] = error.context
    if debug:
        logger.exception("nodiff run failed", **log_fields)
    else:
        logger.error("nodiff run failed", **log_fields)
    status.set_failed(message)
