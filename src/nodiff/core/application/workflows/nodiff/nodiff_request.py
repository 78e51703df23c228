from dataclasses import dataclass

from nodiff.core.domain.pull_request import PullRequestContext
from nodiff.core.domain.response import ResponseConfig


@dataclass(frozen=True)
class NoDiffRequest:
    """Everything a single run needs, validated at the boundary."""

    pull_request: PullRequestContext
    response_config: ResponseConfig
    path_filter: tuple[str, ...] = ()

    @property
    def base_ref(self) -> str:
        return self.pull_request.base_ref
