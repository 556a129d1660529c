import pytest

from playnet.functions import Activations, RegularizationFunctions
from playnet.network import DEFAULT_BIAS, Link, Network, Node


def make_pair() -> Network:
    source = Node("x", Activations.LINEAR)
    dest = Node("1", Activations.LINEAR)
    link = Link(source, dest, RegularizationFunctions.L2, weight=2.0)
    source.output_links.append(link)
    dest.input_links.append(link)
    return Network([[source], [dest]])


def test_node_defaults() -> None:
    node = Node("a", Activations.TANH)
    assert node.id == "a"
    assert node.bias == DEFAULT_BIAS == 0.1
    assert node.input_links == []
    assert node.output_links == []
    assert node.acc_input_der == 0
    assert node.num_accumulated_ders == 0
    assert node.activation is Activations.TANH


def test_node_zero_init() -> None:
    assert Node("a", Activations.TANH, init_zero=True).bias == 0


def test_link_identity() -> None:
    network = make_pair()
    link = network.links[0]
    assert link.id == "x-1"
    assert link.source is network[0][0]
    assert link.dest is network[1][0]
    assert link.regularization is RegularizationFunctions.L2
    assert not link.is_dead
    assert link.acc_error_der == 0
    assert link.num_accumulated_ders == 0


def test_update_output() -> None:
    network = make_pair()
    source, dest = network.nodes
    source.output = 5.0
    dest.bias = 1.0
    assert dest.update_output() == 11.0
    assert dest.total_input == 11.0
    assert dest.output == 11.0


def test_update_output_applies_activation() -> None:
    source = Node("x", Activations.LINEAR)
    dest = Node("1", Activations.RELU, init_zero=True)
    link = Link(source, dest, weight=-1.0)
    dest.input_links.append(link)
    source.output = 3.0
    assert dest.update_output() == 0.0
    assert dest.total_input == -3.0


def test_update_output_sums_dead_links() -> None:
    network = make_pair()
    source, dest = network.nodes
    network.links[0].is_dead = True
    source.output = 1.0
    assert dest.update_output() == pytest.approx(2.0 + DEFAULT_BIAS)


def test_network_arenas() -> None:
    network = make_pair()
    assert len(network) == 2
    assert [node.id for node in network.nodes] == ["x", "1"]
    assert [link.id for link in network.links] == ["x-1"]
    assert network.input_layer == [network.nodes[0]]
    assert network.output_layer == [network.nodes[1]]
    assert network.output_node is network.nodes[1]
    assert list(network) == network.layers


def test_reset_accumulators() -> None:
    network = make_pair()
    node, link = network.nodes[1], network.links[0]
    node.acc_input_der, node.num_accumulated_ders = 3.0, 2
    link.acc_error_der, link.num_accumulated_ders = -4.0, 2
    network.reset_accumulators()
    assert (node.acc_input_der, node.num_accumulated_ders) == (0, 0)
    assert (link.acc_error_der, link.num_accumulated_ders) == (0, 0)
    # Weights and biases are the trainer's to keep.
    assert link.weight == 2.0
    assert node.bias == DEFAULT_BIAS
