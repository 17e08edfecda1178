# vnn

A small, fully connected feed-forward neural network for handwritten digit
classification. It reads training images and labels in the IDX format used by
MNIST, builds a four-layer network (784 → 480 → 200 → 180 → 10) with sigmoid
hidden layers and a softmax output, and trains it with full-batch gradient
descent (learning rate 0.03).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
vnn --help
```

The `vnn` command reads an IDX image file and an IDX label file, trains the
network on the first samples of them and prints the mean cost after every
training cycle as `cost after one cycle<TAB><value>`.

Options:

- `--images PATH` – IDX3 image file (default `resources/train-images.idx3-ubyte`)
- `--labels PATH` – IDX1 label file (default `resources/train-labels.idx1-ubyte`)
- `--epochs N` – number of training cycles (default 300)
- `--samples N` – number of samples in the training batch (default 2000)
- `--seed N` – seed for the random initial weights (default: unseeded)

## Library use

Reading IDX files:

```python
from vnn.imageloading import read_images, read_labels

images = read_images("train-images.idx3-ubyte")   # list of bytes, one per image
labels = read_labels("train-labels.idx1-ubyte")   # bytes, one label per sample
```

`read_images` expects magic number 2051 and `read_labels` expects 2049; a
wrong magic number, a negative count or a file that ends early raises
`ValueError`. A file that cannot be opened raises the usual `OSError`.
`read_int` reads a single big-endian 32-bit integer from a binary stream.

Training a network:

```python
import numpy as np
from vnn.cli import build_input_matrix, train
from vnn.network import NeuralNetwork

network = NeuralNetwork(labels, training_size=2000, rng=np.random.default_rng(0))
network.set_input_data(build_input_matrix(images, 2000))
costs = train(network, labels, epochs=300)
```

`build_input_matrix` stacks the first `count` images as the columns of a
float matrix of shape `(784, count)`. `train` prints the cost of each cycle
and returns the costs as a list. `NeuralNetwork` raises `ValueError` when it
gets fewer labels than `training_size`, and `set_input_data` raises
`ValueError` unless the data has shape `(784, training_size)`.

One training cycle can also be done step by step:

```python
network.forward_propagation()
print(network.sum_cross_entropy_loss(labels))
network.backpropagate_output_layer(labels)
network.backpropagate_third_layer()
network.backpropagate_second_layer()
network.backpropagate_first_layer()
network.update_weights_and_biases()
```

Weights, biases, pre-activations (`z1`…`z3`), activations (`a1`…`a3`), the
output probabilities `y_hat` and the gradients are plain NumPy arrays on the
network object. Note that each layer is fed the previous layer's
pre-activation values (`z1`, `z2`, `z3`); the sigmoid activations are
computed and kept, and `a3` is used for the output layer's weight gradient.
Progress messages of the forward and backward passes go to the
`vnn.network` logger at debug level.

The module-level helpers `sigmoid` (argument clamped to [-100, 100]),
`sigmoid_derivative`, `softmax` (column-wise), `cross_entropy_loss`
(probability clamped to at least 1e-15) and `cost` (unclamped negative log
probability; 0 for a label out of range) in `vnn.network` can be used on
their own.

## Showing an image

`vnn.imageloading.show_image(pixels, 28, 28)` opens a window with pygame and
shows a grayscale image for two seconds; it needs a display.
`grayscale_to_argb` gives the opaque ARGB8888 pixel values without opening a
window.

## What it does not do

The package only trains on one fixed batch and reports the training cost. It
does not evaluate on a test set, predict digits for new images, or save and
load trained weights.