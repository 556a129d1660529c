from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from . import netlog
from .errors import ValidationError
from .functions import get_activation, get_error, get_regularization
from .network import Link, Network, Node

if TYPE_CHECKING:
    from typing import Callable, Optional, Sequence

    from .functions import ActivationLike, ErrorLike, RegularizationLike


# List of functions in this file:
# - build_network: Construct a fully connected layered network
# - forward_prop: Evaluate the network on one input vector
# - back_prop: Accumulate error derivatives for one target
# - get_output_node: The single node of the last layer
# - for_each_node: Visit every node, optionally skipping the inputs
# - reset_accumulators: Zero every accumulated derivative


log = netlog.setup_logging("playnet", level="INFO")

INIT_WEIGHT_RANGE = 0.5


def build_network(
    network_shape: Sequence[int],
    activation: ActivationLike,
    output_activation: ActivationLike,
    regularization: RegularizationLike,
    input_ids: Sequence[str],
    init_zero: bool = False,
    rng: Optional[np.random.Generator] = None,
) -> Network:
    """Builds a network where every node is linked to each node of the previous layer.

    Args:
    ----
        network_shape: Number of nodes in each layer. Entry 0 is the input layer.
        activation: Activation of the hidden nodes.
        output_activation: Activation of the output nodes.
        regularization: Regularization attached to every link, or None.
        input_ids: Ids of the input nodes, one per entry of the input layer.
        init_zero: Start every weight and bias at 0 instead of the defaults.
        rng: Source of the initial weights. A fresh generator is used when omitted.

    Returns:
    -------
        Network: The wired network. Hidden and output nodes get the ids
        "1", "2", ... in layer order.

    """
    activation = get_activation(activation)
    output_activation = get_activation(output_activation)
    regularization = get_regularization(regularization)
    if rng is None:
        rng = np.random.default_rng()

    num_layers = len(network_shape)
    network = Network()
    node_id = 1
    for layer_idx in range(num_layers):
        is_output_layer = layer_idx == num_layers - 1
        is_input_layer = layer_idx == 0
        current_layer = []
        for i in range(network_shape[layer_idx]):
            if is_input_layer:
                node = Node(input_ids[i], activation, init_zero)
            else:
                node = Node(
                    str(node_id),
                    output_activation if is_output_layer else activation,
                    init_zero,
                )
                node_id += 1
                # Wire this node to every node of the previous layer.
                for prev_node in network[layer_idx - 1]:
                    weight = 0.0 if init_zero else float(rng.uniform(-INIT_WEIGHT_RANGE, INIT_WEIGHT_RANGE))
                    link = Link(prev_node, node, regularization, weight)
                    prev_node.output_links.append(link)
                    node.input_links.append(link)
            current_layer.append(node)
        network.add_layer(current_layer)

    log.debug(
        "Built network %s with %d nodes and %d links (activation=%s, output=%s, regularization=%s)",
        list(network_shape),
        len(network.nodes),
        len(network.links),
        activation.name,
        output_activation.name,
        regularization.name if regularization is not None else None,
    )
    return network


def forward_prop(network: Network, inputs: Sequence[float]) -> float:
    """Runs the network on one input vector.

    Args:
    ----
        network: The network to evaluate.
        inputs: One value per input node, in input layer order.

    Returns:
    -------
        float: The output of the output node.

    Raises:
    ------
        ValidationError: If `inputs` does not match the input layer size. The
            network is left untouched.

    """
    input_layer = network.input_layer
    if len(inputs) != len(input_layer):
        log.debug("Rejected input of length %d for %d input nodes", len(inputs), len(input_layer))
        raise ValidationError(
            "input length mismatch: the network has {} input nodes but got {} values".format(
                len(input_layer), len(inputs)
            )
        )

    # Input nodes have no links or bias to fold in.
    for node, value in zip(input_layer, inputs):
        node.output = value
    for current_layer in network.layers[1:]:
        for node in current_layer:
            node.update_output()
    return network.output_node.output


def back_prop(
    network: Network,
    target: float,
    error_func: ErrorLike,
) -> None:
    """Accumulates the error derivatives of the last forward pass.

    Must follow a `forward_prop` on the input that `target` belongs to.
    Derivatives are added to the `acc_*` fields of every node and live link
    and are never cleared here; see `reset_accumulators`.

    Args:
    ----
        network: The network `forward_prop` was just run on.
        target: The value the output node should have produced.
        error_func: The error to differentiate, or its catalog name.

    """
    error_func = get_error(error_func)

    # Seed with the derivative of the error with respect to the output.
    output_node = network.output_node
    output_node.output_der = error_func.derivative(output_node.output, target)

    for layer_idx in range(len(network) - 1, 0, -1):
        current_layer = network[layer_idx]

        # dE/d(total input) of every node in this layer.
        for node in current_layer:
            node.input_der = node.output_der * node.activation.derivative(node.total_input)
            node.acc_input_der += node.input_der
            node.num_accumulated_ders += 1

        # dE/dw of every live link feeding this layer.
        for node in current_layer:
            for link in node.input_links:
                if link.is_dead:
                    continue
                link.error_der = node.input_der * link.source.output
                link.acc_error_der += link.error_der
                link.num_accumulated_ders += 1

        if layer_idx == 1:
            break

        # dE/d(output) of the previous layer, now that every input_der here is final.
        for node in network[layer_idx - 1]:
            node.output_der = 0.0
            for link in node.output_links:
                node.output_der += link.weight * link.dest.input_der


def get_output_node(network: Network) -> Node:
    """Returns the single node of the last layer."""
    return network.output_node


def for_each_node(network: Network, accessor: Callable[[Node], None], ignore_inputs: bool = False) -> None:
    """Calls `accessor` on every node, layer by layer.

    Args:
    ----
        network: The network to walk.
        accessor: Called once per node.
        ignore_inputs: Skip the input layer.

    """
    for current_layer in network.layers[1 if ignore_inputs else 0 :]:
        for node in current_layer:
            accessor(node)


def reset_accumulators(network: Network) -> None:
    """Zeroes every accumulated derivative. Only the trainer calls this, after applying an update."""
    network.reset_accumulators()
