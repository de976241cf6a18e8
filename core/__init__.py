"""Action workflows for RecordBuilder."""

from .workflow import MISSING_STRUCTURE_MESSAGE, AddResult, SubmoduleWorkflow

__all__ = ["MISSING_STRUCTURE_MESSAGE", "AddResult", "SubmoduleWorkflow"]
