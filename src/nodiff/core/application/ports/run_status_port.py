from abc import ABC, abstractmethod


class RunStatusPort(ABC):
    """Terminal status of the CI job."""

    @abstractmethod
    def set_failed(self, message: str) -> None:
        """Mark the run as failed with ``message`` as the status text."""

    @abstractmethod
    def warn(self, message: str) -> None:
        """Surface ``message`` without failing the run."""
