from ekflow.algorithms.max_flow import calc_max_flow
from ekflow.algorithms.min_cut import min_cut, residual_reachable
from ekflow.model.network import Network
from ekflow.types.dto import EdgeFlow


def test_min_cut_chain_is_the_bottleneck_edge(chain3):
    calc_max_flow(chain3, 0, 2)
    cut = min_cut(chain3, 0)
    assert cut.source_side == frozenset({0, 1})
    assert cut.edges == (EdgeFlow(1, 2, 3, 3),)
    assert cut.capacity == 3


def test_min_cut_textbook_network(clrs6):
    result = calc_max_flow(clrs6, 0, 5)
    cut = min_cut(clrs6, 0)
    assert cut.capacity == result.total_flow == 23
    assert cut.source_side == frozenset({0, 1, 2, 4})
    assert [(e.source, e.destination) for e in cut.edges] == [(1, 3), (4, 3), (4, 5)]
    assert all(e.flow == e.capacity for e in cut.edges)


def test_min_cut_disconnected_sink(disconnected_sink):
    calc_max_flow(disconnected_sink, 0, 3)
    cut = min_cut(disconnected_sink, 0)
    assert cut.source_side == frozenset({0, 1, 2})
    assert cut.edges == ()
    assert cut.capacity == 0


def test_residual_reachable_uses_backward_edges():
    net = Network(3)
    net.add_edge(1, 0, 5).add_flow(2)
    net.add_edge(1, 2, 5).add_flow(5)
    # 0 reaches 1 only by cancelling flow on 1->0; 1->2 is saturated
    assert residual_reachable(net, 0) == {0, 1}


def test_residual_reachable_on_fresh_network(diamond4):
    assert residual_reachable(diamond4, 0) == {0, 1, 2, 3}
    assert residual_reachable(diamond4, 3) == {3}


def test_min_cut_to_dict(chain3):
    calc_max_flow(chain3, 0, 2)
    assert min_cut(chain3, 0).to_dict() == {
        "source_side": [0, 1],
        "edges": [{"source": 1, "destination": 2, "flow": 3, "capacity": 3}],
        "capacity": 3,
    }
