from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from typing import Iterable, Optional, Sequence

    from .functions import ActivationFunction, RegularizationFunction


DEFAULT_BIAS = 0.1


class Node:
    """A single unit of the network.

    A node sums the weighted outputs of the nodes feeding it, adds its bias
    and passes the total through its activation function. The fields filled
    in by the backward pass (`output_der`, `input_der`) are only meaningful
    right after one; the `acc_*` fields keep growing until the trainer
    calls `reset_accumulators`.
    """

    id: str
    input_links: List[Link]
    output_links: List[Link]
    bias: float
    total_input: float
    output: float
    output_der: float
    input_der: float
    acc_input_der: float
    num_accumulated_ders: int
    activation: ActivationFunction

    def __init__(self, id: str, activation: ActivationFunction, init_zero: bool = False):
        self.id = id
        self.activation = activation
        self.input_links = []
        self.output_links = []
        self.bias = 0.0 if init_zero else DEFAULT_BIAS
        self.total_input = 0.0
        self.output = 0.0
        self.output_der = 0.0
        self.input_der = 0.0
        self.acc_input_der = 0.0
        self.num_accumulated_ders = 0

    def update_output(self) -> float:
        """Recomputes `total_input` and `output` from the input links.

        Dead links still take part in the sum.

        Returns
        -------
            float: The new output of the node.

        """
        self.total_input = self.bias
        for link in self.input_links:
            self.total_input += link.weight * link.source.output
        self.output = self.activation.value(self.total_input)
        return self.output

    def reset_accumulators(self) -> None:
        """Zeroes the bias gradient accumulated over backward passes."""
        self.acc_input_der = 0.0
        self.num_accumulated_ders = 0

    def __repr__(self) -> str:
        return "Node(id={!r}, bias={}, output={})".format(self.id, self.bias, self.output)


class Link:
    """A weighted connection from `source` to `dest`.

    The link is shared between the two nodes it joins: it sits in the
    source's `output_links` and in the destination's `input_links`.
    """

    id: str
    source: Node
    dest: Node
    weight: float
    is_dead: bool
    error_der: float
    acc_error_der: float
    num_accumulated_ders: int
    regularization: Optional[RegularizationFunction]

    def __init__(
        self,
        source: Node,
        dest: Node,
        regularization: Optional[RegularizationFunction] = None,
        weight: float = 0.0,
    ):
        self.id = source.id + "-" + dest.id
        self.source = source
        self.dest = dest
        self.regularization = regularization
        self.weight = weight
        self.is_dead = False
        self.error_der = 0.0
        self.acc_error_der = 0.0
        self.num_accumulated_ders = 0

    def reset_accumulators(self) -> None:
        """Zeroes the weight gradient accumulated over backward passes."""
        self.acc_error_der = 0.0
        self.num_accumulated_ders = 0

    def __repr__(self) -> str:
        return "Link(id={!r}, weight={}, is_dead={})".format(self.id, self.weight, self.is_dead)


class Network:
    """Layers of nodes wired by links.

    The network owns every node and link. `layers` keeps the nodes grouped
    by depth; `nodes` and `links` list them flat, in creation order.
    """

    layers: List[List[Node]]
    nodes: List[Node]
    links: List[Link]

    def __init__(self, layers: Optional[Sequence[Sequence[Node]]] = None):
        self.layers = []
        self.nodes = []
        self.links = []
        for layer in layers or ():
            self.add_layer(layer)

    def add_layer(self, layer: Iterable[Node]) -> List[Node]:
        """Appends a layer, recording its nodes and their input links."""
        nodes = list(layer)
        self.layers.append(nodes)
        self.nodes.extend(nodes)
        for node in nodes:
            self.links.extend(node.input_links)
        return nodes

    @property
    def input_layer(self) -> List[Node]:
        return self.layers[0]

    @property
    def output_layer(self) -> List[Node]:
        return self.layers[-1]

    @property
    def output_node(self) -> Node:
        """The single node of the last layer."""
        return self.layers[-1][0]

    def reset_accumulators(self) -> None:
        """Zeroes every accumulated gradient in the network."""
        for node in self.nodes:
            node.reset_accumulators()
        for link in self.links:
            link.reset_accumulators()

    def __len__(self) -> int:
        return len(self.layers)

    def __iter__(self):
        return iter(self.layers)

    def __getitem__(self, index: int) -> List[Node]:
        return self.layers[index]
