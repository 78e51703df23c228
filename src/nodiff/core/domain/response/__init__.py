from nodiff.core.domain.response.action_outputs import ActionOutputs
from nodiff.core.domain.response.response_config import ResponseConfig
from nodiff.core.domain.response.review_kind import ReviewKind

__all__ = ["ActionOutputs", "ResponseConfig", "ReviewKind"]
