import numpy as np
import pygame
from pygame import Rect

from NN import NeuralNetwork, init_network

SCREEN_SIZE = (720, 480)
BACKGROUND = (20, 20, 30)
FPS = 60


def weight_to_color(value, limit):
    """Blue for negative weights, red for positive, brighter the larger |value| is."""
    if limit <= 0:
        return (0, 0, 0)
    intensity = int(255 * min(abs(value) / limit, 1.0))
    if value >= 0:
        return (intensity, 0, 0)
    return (0, 0, intensity)


def draw_matrix(surface, matrix, rect: Rect, limit=None):
    """Draw every element of matrix as a coloured cell inside rect."""
    matrix = np.asarray(matrix, dtype=float)
    rows, cols = matrix.shape
    if limit is None:
        limit = np.max(np.abs(matrix))

    cell_width = rect.width / cols
    cell_height = rect.height / rows
    for i in range(rows):
        for j in range(cols):
            cell = Rect(int(rect.x + j * cell_width), int(rect.y + i * cell_height),
                        max(int(cell_width), 1), max(int(cell_height), 1))
            pygame.draw.rect(surface, weight_to_color(matrix[i, j], limit), cell)


class NetworkVisualizer:
    def __init__(self, network: NeuralNetwork, inputs, targets, max_steps=2000):
        """
        Shows the weights of a network while it is trained on one example.

        Parameters:
        - network: the network to train.
        - inputs: input vector fed on every step.
        - targets: expected output for inputs.
        - max_steps: number of train() calls before the window closes.
        """
        self.network = network
        self.inputs = inputs
        self.targets = targets
        self.max_steps = max_steps
        self.steps = 0

    def layout(self, screen):
        """Split the screen into panels for hidden weights, output weights and the output vector."""
        width, height = screen.get_width(), screen.get_height()
        margin = 20
        panel_width = (width - 4 * margin) // 3
        panel_height = height - 2 * margin
        return (Rect(margin, margin, panel_width, panel_height),
                Rect(2 * margin + panel_width, margin, panel_width, panel_height),
                Rect(3 * margin + 2 * panel_width, margin, panel_width, panel_height))

    def draw(self, screen):
        screen.fill(BACKGROUND)
        hidden_rect, output_rect, guess_rect = self.layout(screen)

        # shared scale so both layers are comparable
        limit = max(np.max(np.abs(self.network.hidden_weights)),
                    np.max(np.abs(self.network.output_weights)))
        draw_matrix(screen, self.network.hidden_weights, hidden_rect, limit)
        draw_matrix(screen, self.network.output_weights, output_rect, limit)

        guess = self.network.forward(self.inputs)
        draw_matrix(screen, guess, guess_rect, 1.0)

    def step(self):
        self.network.train(self.inputs, self.targets)
        self.steps += 1

    def run(self):
        """Train the network and visualise the weights until closed or max_steps is hit."""
        pygame.init()
        clock = pygame.time.Clock()
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Network weights")

        while self.steps < self.max_steps:
            # Handle Pygame events (to allow closing the window)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.quit()
                    return self.steps

            self.step()
            self.draw(screen)
            pygame.display.flip()
            clock.tick(FPS)

        print(f"Finished after {self.steps} steps. Guess: {self.network.forward(self.inputs).ravel()}")
        pygame.quit()
        return self.steps


if __name__ == "__main__":
    net = init_network(4, 8, 2, 0.5)
    NetworkVisualizer(net, [0.0, 1.0, 0.5, -0.5], [0.9, 0.1]).run()
