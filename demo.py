import argparse

from NN import init_network, init_weights
from print_network import print_matrix, print_network

LAYER_SIZES = [10, 20, 5]       # input, hidden, output
LABELLED_LAYER_SIZES = [5, 10, 5]
LEARNING_RATE = 0.01            # Too small = learns slow, too big = overshoots the minimum


def run_guess(sizes=LAYER_SIZES, learning_rate=LEARNING_RATE, rng=None):
    """Builds a fresh network, feeds it a random input and prints weights and guess."""
    net = init_network(*sizes, learning_rate, rng=rng)

    rand_input = init_weights(net.input_size, 1, 1, rng)
    guess = net.forward(rand_input)

    print("[Input Layer -> Hidden Layer Matrix]")
    print_matrix(net.hidden_weights)

    print("[Hidden Layer-> Output Layer Matrix]")
    print_matrix(net.output_weights)

    print("[Guess Matrix]")
    print_matrix(guess)
    return guess


def run_labelled(sizes=LABELLED_LAYER_SIZES, learning_rate=LEARNING_RATE, rng=None):
    net = init_network(*sizes, learning_rate, rng=rng)
    print_network(net)
    return net


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the three layer network demo.")
    parser.add_argument("--labelled", action="store_true",
                        help="print every weight with its input/hidden/output label instead")
    args = parser.parse_args(argv)

    if args.labelled:
        run_labelled()
    else:
        run_guess()


if __name__ == "__main__":
    main()
