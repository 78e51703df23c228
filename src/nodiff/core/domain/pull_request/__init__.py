from nodiff.core.domain.pull_request.pull_request_context import PullRequestContext

__all__ = ["PullRequestContext"]
