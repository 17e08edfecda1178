"""A four-layer fully connected network trained by batch gradient descent."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

SIZE_INPUT_LAYER = 784
SIZE_FIRST_LAYER = 480
SIZE_SECOND_LAYER = 200
SIZE_THIRD_LAYER = 180
SIZE_OUTPUT_LAYER = 10
SIZE_TRAINING_DATA = 2000
LEARNING_RATE = 0.03

_EPSILON = 1e-15
_WEIGHT_SCALE = 0.01

log = logging.getLogger(__name__)


def sigmoid(x):
    """Logistic function with its argument clamped to [-100, 100]."""
    return 1.0 / (1.0 + np.exp(-np.clip(x, -100.0, 100.0)))


def sigmoid_derivative(x):
    """Derivative of the logistic function."""
    y = sigmoid(x)
    return y * (1.0 - y)


def softmax(m) -> np.ndarray:
    """Column-wise softmax of a matrix."""
    m = np.asarray(m, dtype=float)
    exp = np.exp(m - m.max(axis=0, keepdims=True))
    return exp / exp.sum(axis=0, keepdims=True)


def cross_entropy_loss(y_hat, correct_label: int) -> float:
    """Cross-entropy of one prediction, with the probability clamped away from zero."""
    y_hat = np.asarray(y_hat, dtype=float)
    if correct_label < 0 or correct_label >= y_hat.size:
        return 0.0
    prob = min(max(float(y_hat[correct_label]), _EPSILON), 1.0)
    return -float(np.log(prob))


def cost(label, y_hat) -> float:
    """Negative log-probability of the correct class, or 0 for an invalid label."""
    y_hat = np.asarray(y_hat, dtype=float)
    index = int(label)
    if index < 0 or index >= y_hat.size:
        return 0.0
    with np.errstate(divide="ignore"):
        return -float(np.log(y_hat[index]))


class NeuralNetwork:
    """Network of 784-480-200-180-10 neurons trained on a fixed batch."""

    def __init__(self, labels: Sequence[int], training_size: int = SIZE_TRAINING_DATA,
                 rng=None) -> None:
        if len(labels) < training_size:
            raise ValueError(
                f"Need at least {training_size} labels, got {len(labels)}")
        self.training_size = training_size
        generator = np.random.default_rng(rng)

        def weights(rows: int, cols: int) -> np.ndarray:
            return generator.uniform(-1.0, 1.0, (rows, cols)) * _WEIGHT_SCALE

        sizes = (SIZE_INPUT_LAYER, SIZE_FIRST_LAYER, SIZE_SECOND_LAYER,
                 SIZE_THIRD_LAYER, SIZE_OUTPUT_LAYER)
        self.w1 = weights(sizes[1], sizes[0])
        self.w2 = weights(sizes[2], sizes[1])
        self.w3 = weights(sizes[3], sizes[2])
        self.w4 = weights(sizes[4], sizes[3])
        self.b1 = np.zeros((sizes[1], 1))
        self.b2 = np.zeros((sizes[2], 1))
        self.b3 = np.zeros((sizes[3], 1))
        self.b4 = np.zeros((sizes[4], 1))

        n = training_size
        self.input_data = np.zeros((sizes[0], n))
        self.z1 = np.zeros((sizes[1], n))
        self.z2 = np.zeros((sizes[2], n))
        self.z3 = np.zeros((sizes[3], n))
        self.a1 = np.zeros((sizes[1], n))
        self.a2 = np.zeros((sizes[2], n))
        self.a3 = np.zeros((sizes[3], n))
        self.y_hat = np.zeros((sizes[4], n))

        self.de_dyhat = np.zeros((sizes[4], n))
        self.dz3 = np.zeros((sizes[3], n))
        self.dz2 = np.zeros((sizes[2], n))
        self.dw1 = np.zeros_like(self.w1)
        self.dw2 = np.zeros_like(self.w2)
        self.dw3 = np.zeros_like(self.w3)
        self.dw4 = np.zeros_like(self.w4)
        self.db1 = np.zeros_like(self.b1)
        self.db2 = np.zeros_like(self.b2)
        self.db3 = np.zeros_like(self.b3)
        self.db4 = np.zeros_like(self.b4)

        self.y = np.zeros((n, SIZE_OUTPUT_LAYER))
        for row, label in enumerate(labels[:n]):
            if label < SIZE_OUTPUT_LAYER:
                self.y[row, label] = 1.0

    def set_input_data(self, images) -> None:
        """Set the training batch, one image per column."""
        data = np.asarray(images, dtype=float)
        expected = (SIZE_INPUT_LAYER, self.training_size)
        if data.shape != expected:
            raise ValueError(f"Input data must have shape {expected}, got {data.shape}")
        self.input_data = data

    def forward_propagation(self) -> None:
        """Compute the output probabilities for the whole batch."""
        log.debug("Start Calculating")
        self.z1 = self.w1 @ self.input_data + self.b1
        self.a1 = sigmoid(self.z1)
        log.debug("Layer 1 passed")
        self.z2 = self.w2 @ self.z1 + self.b2
        self.a2 = sigmoid(self.z2)
        log.debug("Layer 2 passed")
        self.z3 = self.w3 @ self.z2 + self.b3
        self.a3 = sigmoid(self.z3)
        log.debug("Layer 3 passed")
        self.y_hat = softmax(self.w4 @ self.z3 + self.b4)
        log.debug("Output Layer passed")

    def sum_cross_entropy_loss(self, labels: Sequence[int]) -> float:
        """Mean loss over the batch."""
        total = sum(cost(label, column)
                    for label, column in zip(labels, self.y_hat.T))
        return total / self.training_size

    def backpropagate_output_layer(self, labels: Sequence[int]) -> None:
        """Gradients of the output layer's weights and biases."""
        log.debug("Starte BackProp")
        self.de_dyhat = self.y_hat - self.y.T
        self.dw4 = (self.de_dyhat @ self.a3.T) / self.training_size
        self.db4 = self.de_dyhat.mean(axis=1, keepdims=True)
        log.debug("Output Layer Backpropagation Passed")

    def backpropagate_third_layer(self) -> None:
        """Gradients of the third layer's weights and biases."""
        da3 = self.w4.T @ self.de_dyhat
        self.dz3 = da3 * sigmoid_derivative(self.z3)
        self.dw3 = (self.dz3 @ self.z2.T) / self.training_size
        self.db3 = self.dz3.mean(axis=1, keepdims=True)
        log.debug("Layer 3 derived")

    def backpropagate_second_layer(self) -> None:
        """Gradients of the second layer's weights and biases."""
        da2 = self.w3.T @ self.dz3
        self.dz2 = da2 * sigmoid_derivative(self.z2)
        self.dw2 = (self.dz2 @ self.z1.T) / self.training_size
        self.db2 = self.dz2.mean(axis=1, keepdims=True)
        log.debug("Layer 2 derived")

    def backpropagate_first_layer(self) -> None:
        """Gradients of the first layer's weights and biases."""
        da1 = self.w2.T @ self.dz2
        dz1 = da1 * sigmoid_derivative(self.z1)
        self.dw1 = (dz1 @ self.input_data.T) / self.training_size
        self.db1 = dz1.mean(axis=1, keepdims=True)
        log.debug("Layer 1 derived")

    def update_weights_and_biases(self) -> None:
        """Take one gradient-descent step."""
        self.w4 -= LEARNING_RATE * self.dw4
        self.w3 -= LEARNING_RATE * self.dw3
        self.w2 -= LEARNING_RATE * self.dw2
        self.w1 -= LEARNING_RATE * self.dw1
        self.b4 -= LEARNING_RATE * self.db4
        self.b3 -= LEARNING_RATE * self.db3
        self.b2 -= LEARNING_RATE * self.db2
        self.b1 -= LEARNING_RATE * self.db1