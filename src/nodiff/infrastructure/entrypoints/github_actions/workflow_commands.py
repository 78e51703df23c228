"""Runner-facing side of a run: status annotations and step outputs."""

import sys
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO
from uuid import uuid4

import structlog

from nodiff.core.application.ports import RunStatusPort

logger = structlog.get_logger()


def escape_data(value: str) -> str:
    """Escape a workflow command message so multi-line text survives."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GitHubActionsStatusReporter(RunStatusPort):
    """Writes ``::error::`` / ``::warning::`` commands and remembers whether the run failed."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.failed = False
        self.failure_message: str | None = None

    def set_failed(self, message: str) -> None:
        self.failed = True
        self.failure_message = message
        self._issue("error", message)

    def warn(self, message: str) -> None:
        self._issue("warning", message)

    def _issue(self, command: str, message: str) -> None:
        stream = self._stream or sys.stdout
        print(f"::{command}::{escape_data(message)}", file=stream, flush=True)


class ActionOutputWriter:
    """Appends step outputs to the file named by GITHUB_OUTPUT."""

    def __init__(self, output_path: Path | None) -> None:
        self._output_path = output_path

    def write(self, outputs: Mapping[str, str]) -> None:
        if self._output_path is None:
            logger.warning("GITHUB_OUTPUT is not set; outputs were not published", **outputs)
            return
        with self._output_path.open("a", encoding="utf-8") as fh:
            for name, value in outputs.items():
                delimiter = f"ghadelimiter_{uuid4()}"
                fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        logger.info("Outputs published", outputs=sorted(outputs))
