import numpy as np
import pytest

from NN import NeuralNetwork


@pytest.fixture
def rng():
    """Fixed-seed generator so weight draws are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def zero_network():
    return NeuralNetwork(3, 4, 2, 0.1,
                         hidden_weights=np.zeros((4, 3)),
                         output_weights=np.zeros((2, 4)))
