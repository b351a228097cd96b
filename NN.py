import math

import numpy as np

from matrix_ops import (
    DimensionMismatch,
    add,
    apply,
    column,
    dot,
    mult,
    ones_like,
    scale,
    sub,
    transpose,
)

# Three layer network (input -> hidden -> output) with sigmoid activations.
# There are no biases; the network does well enough without them.


class InvalidConfiguration(ValueError):
    """Raised when a network is built with non-positive sizes or learning rate."""


def sigmoid(x):
    # Squishes input between 0 and 1, smooth step.
    return 1 / (1 + np.exp(-x))


def sigmoid_derivative(activation):
    """
    Derivative of the sigmoid written in terms of its own output.

    Parameters:
    - activation: matrix that already holds sigmoid(z) values, not z.
    """
    return mult(activation, sub(ones_like(activation), activation))


def init_weights(rows: int, cols: int, fan_in: float, rng=None) -> np.ndarray:
    """Creates a (rows x cols) weight matrix drawn from U[-1/sqrt(fan_in), 1/sqrt(fan_in)].

    Scaling by the size of the previous layer keeps the starting predictions
    unsure (close to 0.5) no matter how wide the layers are.

    Parameters:
    - rows: number of neurons in the layer being fed.
    - cols: number of neurons feeding in.
    - fan_in: size of the feeding layer.
    - rng: numpy Generator. A freshly seeded one is used when omitted.

    Returns:
    - weights: the new (rows x cols) matrix.
    """
    if not math.isfinite(fan_in) or fan_in <= 0:
        raise InvalidConfiguration(f"fan_in must be positive, got {fan_in}")
    if rng is None:
        rng = np.random.default_rng()
    limit = 1 / math.sqrt(fan_in)
    return rng.uniform(low=-limit, high=limit, size=(rows, cols))


def _check_size(name, value):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidConfiguration(f"{name} must be positive, got {value}")
    return int(value)


def _frozen(weights):
    weights = np.array(weights, dtype=float)
    weights.setflags(write=False)
    return weights


class NeuralNetwork:
    def __init__(self, input_size, hidden_size, output_size, learning_rate=0.01,
                 hidden_weights=None, output_weights=None, rng=None):
        self._input_size = _check_size("input_size", input_size)
        self._hidden_size = _check_size("hidden_size", hidden_size)
        self._output_size = _check_size("output_size", output_size)

        if isinstance(learning_rate, bool):
            raise InvalidConfiguration(f"learning_rate must be a number, got {learning_rate!r}")
        try:
            learning_rate = float(learning_rate)
        except (TypeError, ValueError):
            raise InvalidConfiguration(f"learning_rate must be a number, got {learning_rate!r}") from None
        if not math.isfinite(learning_rate) or learning_rate <= 0:
            raise InvalidConfiguration(f"learning_rate must be positive, got {learning_rate}")
        self._learning_rate = learning_rate

        # # of inputs = # of columns, # of outputs = # of rows
        if hidden_weights is None:
            hidden_weights = init_weights(self._hidden_size, self._input_size, self._input_size, rng)
        if output_weights is None:
            output_weights = init_weights(self._output_size, self._hidden_size, self._hidden_size, rng)

        self._set_weights(hidden_weights, output_weights)

    def _set_weights(self, hidden_weights, output_weights):
        hidden_weights = _frozen(hidden_weights)
        output_weights = _frozen(output_weights)
        if hidden_weights.shape != (self._hidden_size, self._input_size):
            raise DimensionMismatch("hidden_weights", hidden_weights.shape,
                                    (self._hidden_size, self._input_size))
        if output_weights.shape != (self._output_size, self._hidden_size):
            raise DimensionMismatch("output_weights", output_weights.shape,
                                    (self._output_size, self._hidden_size))
        # both matrices are swapped in together
        self._hidden_weights = hidden_weights
        self._output_weights = output_weights

    @property
    def input_size(self):
        return self._input_size

    @property
    def hidden_size(self):
        return self._hidden_size

    @property
    def output_size(self):
        return self._output_size

    @property
    def learning_rate(self):
        return self._learning_rate

    @property
    def hidden_weights(self):
        """Input -> hidden weights (hidden_size x input_size), read-only."""
        return self._hidden_weights

    @property
    def output_weights(self):
        """Hidden -> output weights (output_size x hidden_size), read-only."""
        return self._output_weights

    def _propagate(self, inputs):
        inputs = column(inputs)
        hidden = apply(sigmoid, dot(self._hidden_weights, inputs))
        output = apply(sigmoid, dot(self._output_weights, hidden))
        return inputs, hidden, output

    def forward(self, inputs):
        """
        Returns the network's prediction for one input vector.

        Parameters:
        - inputs: sequence (or column vector) of length input_size.

        Returns:
        - output: (output_size x 1) matrix of values in (0, 1).
        """
        _, _, output = self._propagate(inputs)
        return output

    def train(self, inputs, targets):
        """One online gradient descent step on a single (inputs, targets) pair."""
        # Can't reuse forward(), the hidden activations are needed below
        inputs, hidden, output = self._propagate(inputs)
        targets = column(targets)

        output_error = sub(targets, output)
        # Error pushed back through the current (not yet updated) output weights
        hidden_error = dot(transpose(self._output_weights), output_error)

        new_output_weights = add(self._output_weights,
                                 scale(self._learning_rate,
                                       dot(mult(output_error, sigmoid_derivative(output)),
                                           transpose(hidden))))

        new_hidden_weights = add(self._hidden_weights,
                                 scale(self._learning_rate,
                                       dot(mult(hidden_error, sigmoid_derivative(hidden)),
                                           transpose(inputs))))

        self._set_weights(new_hidden_weights, new_output_weights)


def init_network(input_size, hidden_size, output_size, learning_rate, rng=None) -> NeuralNetwork:
    """Builds a network with fan-in scaled random weights for both layers."""
    if rng is None:
        rng = np.random.default_rng()
    return NeuralNetwork(input_size, hidden_size, output_size, learning_rate, rng=rng)


def forward(network: NeuralNetwork, inputs):
    return network.forward(inputs)


def train(network: NeuralNetwork, inputs, targets):
    network.train(inputs, targets)
