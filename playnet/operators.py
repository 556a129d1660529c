"""Collection of the scalar mathematical operators behind the function catalog."""

import math


def id(x: float) -> float:
    """Returns the input unchanged.

    Args:
    ----
        x (float): The input number.

    Returns:
    -------
        float: The same input number.

    """
    return x


def one(x: float) -> float:
    """Returns 1 for any input. Derivative of the identity."""
    return 1.0


def tanh(x: float) -> float:
    """Computes the hyperbolic tangent of the input number.

    Infinite inputs are answered directly so that the exponential form
    never evaluates ``inf / inf``.

    Args:
    ----
        x (float): The input number.

    Returns:
    -------
        float: The hyperbolic tangent of x, exactly 1 at +inf and -1 at -inf.

    """
    if x == math.inf:
        return 1.0
    elif x == -math.inf:
        return -1.0
    return math.tanh(x)


def tanh_back(x: float) -> float:
    """Computes the derivative of tanh at x, 1 - tanh(x)^2."""
    out = tanh(x)
    return 1 - out * out


def sigmoid(x: float) -> float:
    """Computes the sigmoid function for the input number.

    Args:
    ----
        x (float): The input number.

    Returns:
    -------
        float: The sigmoid of x.

    """
    if x >= 0:
        return 1 / (1 + math.exp(-1 * x))
    else:
        a = math.exp(x)
        return a / (1 + a)


def sigmoid_back(x: float) -> float:
    """Computes the derivative of the sigmoid at x, s(x) * (1 - s(x))."""
    out = sigmoid(x)
    return out * (1 - out)


def relu(x: float) -> float:
    """Applies the ReLU (Rectified Linear Unit) function.

    Args:
    ----
        x (float): The input number.

    Returns:
    -------
        float: x if x is greater than 0, otherwise 0.

    """
    if x < 0:
        return 0.0
    return x


def relu_back(x: float) -> float:
    """Computes the derivative of the ReLU function.

    Args:
    ----
        x (float): The input number.

    Returns:
    -------
        float: 1 if x is greater than 0, otherwise 0 (including at x == 0).

    """
    if x > 0:
        return 1.0
    return 0.0


def sign(x: float) -> float:
    """Returns -1, 0 or 1 according to the sign of x. sign(0) is 0."""
    if x > 0:
        return 1.0
    elif x < 0:
        return -1.0
    return 0.0


def half_square(x: float) -> float:
    """Computes 0.5 * x^2."""
    return 0.5 * x * x


def square_error(output: float, target: float) -> float:
    """Computes half of the squared difference between output and target.

    Args:
    ----
        output (float): The value the network produced.
        target (float): The value the network should have produced.

    Returns:
    -------
        float: 0.5 * (output - target)^2

    """
    return half_square(output - target)


def square_error_back(output: float, target: float) -> float:
    """Computes the derivative of `square_error` with respect to output."""
    return output - target


def is_close(x: float, y: float) -> bool:
    """Checks if two numbers are close to each other within a small tolerance.

    Args:
    ----
        x (float): The first number.
        y (float): The second number.

    Returns:
    -------
        bool: True if the absolute difference between x and y is less than 1e-2, False otherwise.

    """
    return abs(x - y) < 1e-2
