"""Command line entry point that trains the network on IDX data."""

from __future__ import annotations

import argparse
from typing import Sequence

import numpy as np

from vnn.imageloading import read_images, read_labels
from vnn.network import SIZE_TRAINING_DATA, NeuralNetwork

DEFAULT_IMAGES = "resources/train-images.idx3-ubyte"
DEFAULT_LABELS = "resources/train-labels.idx1-ubyte"
DEFAULT_EPOCHS = 300


def build_input_matrix(images: Sequence[bytes], count: int) -> np.ndarray:
    """Stack the first ``count`` images as columns of a float matrix."""
    if len(images) < count:
        raise ValueError(f"Need at least {count} images, got {len(images)}")
    return np.array([list(image) for image in images[:count]], dtype=float).T


def train(network: NeuralNetwork, labels: Sequence[int], epochs: int) -> list[float]:
    """Run full-batch training and return the cost observed in each epoch."""
    costs = []
    for _ in range(epochs):
        network.forward_propagation()
        loss = network.sum_cross_entropy_loss(labels)
        print(f"cost after one cycle\t{loss}")
        costs.append(loss)
        network.backpropagate_output_layer(labels)
        network.backpropagate_third_layer()
        network.backpropagate_second_layer()
        network.backpropagate_first_layer()
        network.update_weights_and_biases()
    return costs


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Train the network on IDX digit data.")
    parser.add_argument("--images", default=DEFAULT_IMAGES, help="IDX3 image file")
    parser.add_argument("--labels", default=DEFAULT_LABELS, help="IDX1 label file")
    parser.add_argument("--epochs", type=int, default=DEFAULT_EPOCHS)
    parser.add_argument("--samples", type=int, default=SIZE_TRAINING_DATA)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    labels = list(read_labels(args.labels))
    images = read_images(args.images)
    network = NeuralNetwork(labels, training_size=args.samples, rng=args.seed)
    network.set_input_data(build_input_matrix(images, args.samples))
    train(network, labels, args.epochs)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())