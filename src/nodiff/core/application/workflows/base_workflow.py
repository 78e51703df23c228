from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T_Request = TypeVar("T_Request")
T_Result = TypeVar("T_Result")


class BaseWorkflow(ABC, Generic[T_Request, T_Result]):
    """Abstract base for deterministic, step-by-step pipelines."""

    @abstractmethod
    async def execute(self, request: T_Request) -> T_Result:
        """Run the full workflow pipeline for the given request."""
