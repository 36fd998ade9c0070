"""Traversal state, predicates and the depth-first walker that drives them."""

from .path_stack import CURRENT_DIRECTORY, PathSegmentStack
from .predicate_gate import PredicateGate
from .result_accumulator import ResultAccumulator
from .traversal_context import TraversalContext
from .walker import DirectoryWalker

__all__ = [
    "CURRENT_DIRECTORY",
    "DirectoryWalker",
    "PathSegmentStack",
    "PredicateGate",
    "ResultAccumulator",
    "TraversalContext",
]
