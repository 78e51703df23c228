from collections.abc import Iterable


def select_reviewers(requested: Iterable[str], pr_author: str) -> list[str]:
    """Requested handles minus the pull request author, in the requested order.

    Hosting platforms reject review requests addressed to the author.
    """
    return [handle for handle in requested if handle != pr_author]
