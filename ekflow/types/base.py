"""Base aliases and enums shared by the flow model and algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Node identifier: an integer index in ``[0, num_nodes)``.
NodeID = int

#: Edge capacity or flow amount. Integer networks stay integral throughout.
Capacity = Union[int, float]


class EngineState(IntEnum):
    """Lifecycle of a max-flow engine run."""

    #: Looking for another augmenting path.
    SEARCHING = 1
    #: Last search failed; the accumulated flow is maximal.
    DONE = 2
