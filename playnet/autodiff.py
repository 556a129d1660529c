from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .nn import forward_prop

if TYPE_CHECKING:
    from typing import Sequence

    from .functions import ErrorFunction
    from .network import Link, Network


def central_difference(f: Any, *vals: Any, arg: int = 0, epsilon: float = 1e-6) -> Any:
    r"""Computes an approximation to the derivative of `f` with respect to one arg.

    See https://en.wikipedia.org/wiki/Finite_difference for more details.

    Args:
    ----
        f : arbitrary function from n-scalar args to one value
        *vals : n-float values $x_0 \ldots x_{n-1}$
        arg : the number $i$ of the arg to compute the derivative
        epsilon : a small constant

    Returns:
    -------
        An approximation of $f'_i(x_0, \ldots, x_{n-1})$

    """
    return (
        f(*vals[:arg], vals[arg] + epsilon, *vals[arg + 1 :])
        - f(*vals[:arg], vals[arg] - epsilon, *vals[arg + 1 :])
    ) / (2 * epsilon)


def weight_gradient(
    network: Network,
    link: Link,
    inputs: Sequence[float],
    target: float,
    error_func: ErrorFunction,
    epsilon: float = 1e-6,
) -> float:
    """Estimates dE/dw for one link by nudging its weight and re-running the network.

    The link's weight is restored afterwards, but every node's cached
    `total_input` and `output` are left from the last evaluation; run
    `forward_prop` again before `back_prop`.

    Args:
    ----
        network: The network the link belongs to.
        link: The link whose weight is varied.
        inputs: Input vector for `forward_prop`.
        target: Target for `error_func`.
        error_func: The error being differentiated.
        epsilon: Half the width of the difference step.

    Returns:
    -------
        float: The central-difference estimate of the error gradient.

    """
    original = link.weight

    def error_at(weight: float) -> float:
        link.weight = weight
        return error_func.value(forward_prop(network, inputs), target)

    try:
        return central_difference(error_at, original, epsilon=epsilon)
    finally:
        link.weight = original
