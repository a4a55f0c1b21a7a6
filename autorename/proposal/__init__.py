"""
Proposal module turning paths into rename rows and applying them.
"""

from .batch_processor import BatchProcessor
from .conflicts import FilenameConflictResolver
from .generator import ProposalGenerator
from .models import BatchResult, RenameRow, RowState

__all__ = [
    "BatchProcessor",
    "BatchResult",
    "FilenameConflictResolver",
    "ProposalGenerator",
    "RenameRow",
    "RowState",
]
