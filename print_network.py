from NN import NeuralNetwork


def format_matrix(m) -> str:
    """Rows of %.4f values; positives get an extra space so columns line up with the minus signs."""
    lines = []
    for row in m:
        line = ""
        for value in row:
            if value > 0:
                line += " "
            line += f"{value:.4f} "
        lines.append(line)
    return "\n".join(lines) + "\n\n"


def format_network(network: NeuralNetwork) -> str:
    """
    Labelled dump of every weight in the network.

    Parameters:
    - network: the NeuralNetwork to describe.

    Returns:
    - text: multi-line string, one line per input / hidden neuron.
    """
    lines = ['{Key: i2.h4 reads as "Input Neuron 2 to Hidden Neuron 4"}',
             "",
             f"Learn Rate:  {network.learning_rate}",
             "[Input -> Hidden]"]

    # stored as (hidden x input) so walk the columns
    for i in range(network.input_size):
        line = f"Input {i}: "
        for j in range(network.hidden_size):
            weight = network.hidden_weights[j, i]
            line += f" i{i}.h{j}:"
            if weight > 0:
                line += " "
            line += f"{weight:.4f}  "
        lines.append(line)

    lines.append("")
    lines.append("[Hidden -> Output]")

    for i in range(network.hidden_size):
        line = f"Hidden {i}: "
        for j in range(network.output_size):
            weight = network.output_weights[j, i]
            line += f" h{i}.o{j}:"
            if weight > 0:
                line += " "
            line += f"{weight:.4f}  "
        lines.append(line)

    return "\n".join(lines) + "\n"


def print_matrix(m):
    print(format_matrix(m), end="")


def print_network(network: NeuralNetwork):
    print(format_network(network), end="")
