"""Shared typing constructs for ekflow.

Defines the node/capacity aliases, the engine state enum and the immutable
result records passed between the engine, the min-cut query and reporting.
Contains no algorithmic logic.
"""

from ekflow.types.base import Capacity, EngineState, NodeID
from ekflow.types.dto import AugmentingPath, EdgeFlow, MaxFlowResult, MinCut

__all__ = [
    # Enums
    "EngineState",
    # Type aliases
    "Capacity",
    "NodeID",
    # DTOs
    "AugmentingPath",
    "EdgeFlow",
    "MaxFlowResult",
    "MinCut",
]
