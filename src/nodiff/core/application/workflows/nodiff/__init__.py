from nodiff.core.application.workflows.nodiff.nodiff_request import NoDiffRequest
from nodiff.core.application.workflows.nodiff.nodiff_workflow import NoDiffWorkflow

__all__ = ["NoDiffRequest", "NoDiffWorkflow"]
