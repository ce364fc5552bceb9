"""Global pytest configuration and shared sample networks.

Node 0 is the source and the highest-numbered node the sink in every fixture
unless noted otherwise.
"""

from __future__ import annotations

import pytest

from ekflow.model.network import Network


@pytest.fixture
def diamond4() -> Network:
    #        [10]      [10]
    #     ┌──────► 1 ──────┐
    #     │                ▼
    #     0                3
    #     │                ▲
    #     └──────► 2 ──────┘
    #        [10]      [10]
    net = Network(4)
    net.add_edge(0, 1, 10)
    net.add_edge(0, 2, 10)
    net.add_edge(1, 3, 10)
    net.add_edge(2, 3, 10)
    return net


@pytest.fixture
def chain3() -> Network:
    #      [5]      [3]
    #  0 ──────► 1 ──────► 2
    net = Network(3)
    net.add_edge(0, 1, 5)
    net.add_edge(1, 2, 3)
    return net


@pytest.fixture
def zero_edge() -> Network:
    net = Network(2)
    net.add_edge(0, 1, 0)
    return net


@pytest.fixture
def disconnected_sink() -> Network:
    # Node 3 (sink) has no incident edges.
    net = Network(4)
    net.add_edge(0, 1, 7)
    net.add_edge(1, 2, 7)
    net.add_edge(2, 0, 7)
    return net


@pytest.fixture
def bridge8() -> Network:
    # The shortest path 0-1-2-7 uses 1->2. The second path must come in via
    # 0-5-6-2, cancel the flow on 1->2 and leave through 1-3-4-7.
    #
    #   0 ──► 1 ──► 2 ──► 7
    #   │     │     ▲     ▲
    #   ▼     ▼     │     │
    #   5     3 ──► 4 ────┘
    #   │           │
    #   ▼           │
    #   6 ──────────┘ (6 -> 2)
    net = Network(8)
    net.add_edge(0, 1, 1)
    net.add_edge(1, 2, 1)
    net.add_edge(2, 7, 1)
    net.add_edge(1, 3, 1)
    net.add_edge(3, 4, 1)
    net.add_edge(4, 7, 1)
    net.add_edge(0, 5, 1)
    net.add_edge(5, 6, 1)
    net.add_edge(6, 2, 1)
    return net


@pytest.fixture
def clrs6() -> Network:
    # Textbook six-node network, max flow 0 -> 5 is 23.
    net = Network(6)
    net.add_edge(0, 1, 16)
    net.add_edge(0, 2, 13)
    net.add_edge(1, 3, 12)
    net.add_edge(2, 1, 4)
    net.add_edge(2, 4, 14)
    net.add_edge(3, 2, 9)
    net.add_edge(3, 5, 20)
    net.add_edge(4, 3, 7)
    net.add_edge(4, 5, 4)
    return net


@pytest.fixture
def parallel3() -> Network:
    # Two parallel edges 0->1 and a self-loop on 1.
    net = Network(3)
    net.add_edge(0, 1, 2)
    net.add_edge(0, 1, 3)
    net.add_edge(1, 1, 100)
    net.add_edge(1, 2, 10)
    return net
