"""Activation, error and regularization functions used by the network.

Every entry pairs a value function with its derivative. The pairs carry no
state, so a single instance of each is shared by every node and link that
uses it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from typing_extensions import TypeAlias

from . import operators


@dataclass(frozen=True)
class ActivationFunction:
    """An activation `value(x)` together with its `derivative(x)`."""

    name: str
    value: Callable[[float], float]
    derivative: Callable[[float], float]


@dataclass(frozen=True)
class ErrorFunction:
    """An error `value(output, target)` together with its `derivative(output, target)`.

    The derivative is taken with respect to `output`.
    """

    name: str
    value: Callable[[float, float], float]
    derivative: Callable[[float, float], float]


@dataclass(frozen=True)
class RegularizationFunction:
    """A weight penalty `value(w)` together with its `derivative(w)`."""

    name: str
    value: Callable[[float], float]
    derivative: Callable[[float], float]


class Activations:
    """Catalog of the built-in activation functions."""

    TANH = ActivationFunction("tanh", operators.tanh, operators.tanh_back)
    RELU = ActivationFunction("relu", operators.relu, operators.relu_back)
    SIGMOID = ActivationFunction("sigmoid", operators.sigmoid, operators.sigmoid_back)
    LINEAR = ActivationFunction("linear", operators.id, operators.one)


class Errors:
    """Catalog of the built-in error functions."""

    SQUARE = ErrorFunction("square", operators.square_error, operators.square_error_back)


class RegularizationFunctions:
    """Catalog of the built-in regularization functions."""

    L1 = RegularizationFunction("l1", abs, operators.sign)
    L2 = RegularizationFunction("l2", operators.half_square, operators.id)


ActivationLike: TypeAlias = Union[str, ActivationFunction]
ErrorLike: TypeAlias = Union[str, ErrorFunction]
RegularizationLike: TypeAlias = Union[None, str, RegularizationFunction]


activation_functions: Dict[str, ActivationFunction] = {
    "tanh": Activations.TANH,
    "relu": Activations.RELU,
    "sigmoid": Activations.SIGMOID,
    "linear": Activations.LINEAR,
}

error_functions: Dict[str, ErrorFunction] = {
    "square": Errors.SQUARE,
}

regularization_functions: Dict[str, Optional[RegularizationFunction]] = {
    "none": None,
    "l1": RegularizationFunctions.L1,
    "l2": RegularizationFunctions.L2,
}


def get_activation(activation: ActivationLike) -> ActivationFunction:
    """Turns an activation function name into the catalog entry.

    Args:
    ----
        activation: A name such as ``"tanh"`` (case-insensitive) or an
            `ActivationFunction`, which is returned unchanged.

    Returns:
    -------
        ActivationFunction: The matching catalog entry.

    Raises:
    ------
        ValueError: If the name is not in the catalog.

    """
    if isinstance(activation, str):
        try:
            return activation_functions[activation.lower()]
        except KeyError:
            raise ValueError("Unrecognized activation: {}".format(activation)) from None
    return activation


def get_error(error: ErrorLike) -> ErrorFunction:
    """Turns an error function name into the catalog entry. See `get_activation`."""
    if isinstance(error, str):
        try:
            return error_functions[error.lower()]
        except KeyError:
            raise ValueError("Unrecognized error function: {}".format(error)) from None
    return error


def get_regularization(
    regularization: RegularizationLike,
) -> Optional[RegularizationFunction]:
    """Turns a regularization name into the catalog entry.

    ``None`` and ``"none"`` both mean no regularization.
    """
    if isinstance(regularization, str):
        try:
            return regularization_functions[regularization.lower()]
        except KeyError:
            raise ValueError(
                "Unrecognized regularization: {}".format(regularization)
            ) from None
    return regularization
