"""ekflow: maximum flow in directed capacitated networks.

Computes maximum flow with the Edmonds-Karp algorithm: breadth-first search
for shortest augmenting paths in the residual graph, bottleneck augmentation,
and a record of every path found.

Primary API:
    Network - Directed capacitated network over nodes 0..N-1
    MaxFlowEngine - Solver bound to (network, source, sink)
    calc_max_flow() - One-call wrapper returning a MaxFlowResult
    min_cut() - Minimum cut read off a solved network
    load_network() - Read a text or YAML network description

Example:
    from ekflow import Network, calc_max_flow

    net = Network(4)
    net.add_edge(0, 1, 10)
    net.add_edge(0, 2, 10)
    net.add_edge(1, 3, 10)
    net.add_edge(2, 3, 10)

    result = calc_max_flow(net, 0, 3)
    result.total_flow   # 20
    result.paths        # (AugmentingPath((0, 1, 3), 10), AugmentingPath((0, 2, 3), 10))
"""

from __future__ import annotations

from ekflow import cli, logging
from ekflow._version import __version__
from ekflow.algorithms.max_flow import MaxFlowEngine, calc_max_flow
from ekflow.algorithms.min_cut import min_cut, residual_reachable
from ekflow.io import NetworkSpec, load_network, parse_network_text, parse_network_yaml
from ekflow.lib.nx import NodeMap, from_networkx, to_networkx
from ekflow.model.network import Edge, Network
from ekflow.types.base import Capacity, EngineState, NodeID
from ekflow.types.dto import AugmentingPath, EdgeFlow, MaxFlowResult, MinCut

__all__ = [
    # Version
    "__version__",
    # Model
    "Network",
    "Edge",
    # Algorithms
    "MaxFlowEngine",
    "calc_max_flow",
    "min_cut",
    "residual_reachable",
    # Types
    "Capacity",
    "NodeID",
    "EngineState",
    "AugmentingPath",
    "EdgeFlow",
    "MaxFlowResult",
    "MinCut",
    # Input
    "NetworkSpec",
    "load_network",
    "parse_network_text",
    "parse_network_yaml",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
