import numpy as np

from NN import NeuralNetwork
from print_network import format_matrix, format_network, print_matrix


def test_format_matrix_pads_positive_values():
    text = format_matrix(np.array([[0.5, -0.25], [0.0, 1.0]]))
    assert text == " 0.5000 -0.2500 \n0.0000  1.0000 \n\n"


def test_print_matrix_writes_to_stdout(capsys):
    print_matrix(np.array([[-1.0]]))
    assert capsys.readouterr().out == "-1.0000 \n\n"


def test_format_network_labels_each_weight():
    net = NeuralNetwork(2, 3, 1, 0.01,
                        hidden_weights=np.arange(6, dtype=float).reshape(3, 2) - 2,
                        output_weights=np.array([[0.1, -0.2, 0.3]]))
    lines = format_network(net).splitlines()

    assert lines[0] == '{Key: i2.h4 reads as "Input Neuron 2 to Hidden Neuron 4"}'
    assert lines[2] == "Learn Rate:  0.01"
    assert lines[3] == "[Input -> Hidden]"
    # hidden_weights[j, i] is the weight from input i to hidden j
    assert lines[4] == "Input 0:  i0.h0:-2.0000   i0.h1:0.0000   i0.h2: 2.0000  "
    assert lines[5] == "Input 1:  i1.h0:-1.0000   i1.h1: 1.0000   i1.h2: 3.0000  "
    assert "[Hidden -> Output]" in lines
    assert lines[-1] == "Hidden 2:  h2.o0: 0.3000  "
