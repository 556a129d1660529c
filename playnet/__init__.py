"""Feedforward Neural Network Simulation

This package builds small fully connected networks out of individual nodes and links and runs one forward evaluation or one backward gradient-accumulation pass at a time. Updating weights, batching and pruning are left to the trainer that drives it.

Modules
-------

- `operators`: Scalar math behind the function catalog.
- `functions`: Activation, error and regularization value/derivative pairs.
- `network`: The `Node`, `Link` and `Network` data model.
- `nn`: Network construction plus forward and backward propagation.
- `autodiff`: Numerical derivatives for checking the backward pass.
- `errors`: Exceptions raised by the package.
- `netlog`: Logging setup.
"""

from .errors import *  # noqa: F401,F403
from .functions import *  # noqa: F401,F403
from .network import *  # noqa: F401,F403
from .nn import *  # noqa: F401,F403
from .autodiff import *  # noqa: F401,F403
from . import operators, netlog  # noqa: F401,F403
