"""Flow algorithms: Edmonds-Karp max flow and min-cut extraction."""

from ekflow.algorithms.max_flow import MaxFlowEngine, calc_max_flow
from ekflow.algorithms.min_cut import min_cut, residual_reachable

__all__ = [
    "MaxFlowEngine",
    "calc_max_flow",
    "min_cut",
    "residual_reachable",
]
