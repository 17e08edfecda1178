import struct

import numpy as np
import pytest

from vnn.cli import build_input_matrix, main, train
from vnn.network import NeuralNetwork

LABELS = [3, 1, 4]


def _images(count):
    rng = np.random.default_rng(7)
    return [bytes(rng.integers(0, 256, 784, dtype=np.uint8)) for _ in range(count)]


def test_build_input_matrix_columns_are_images():
    images = _images(4)
    matrix = build_input_matrix(images, 3)
    assert matrix.shape == (784, 3)
    assert list(matrix[:, 2]) == [float(v) for v in images[2]]


def test_build_input_matrix_too_few():
    with pytest.raises(ValueError):
        build_input_matrix(_images(2), 3)


def test_train_reports_each_epoch(capsys):
    net = NeuralNetwork(LABELS, training_size=3, rng=0)
    net.set_input_data(build_input_matrix(_images(3), 3) / 255.0)
    costs = train(net, LABELS, 3)
    assert len(costs) == 3
    assert all(np.isfinite(c) and c > 0 for c in costs)
    out = capsys.readouterr().out
    assert out.count("cost after one cycle\t") == 3


def test_main_runs_on_files(tmp_path, capsys):
    images = _images(3)
    image_path = tmp_path / "images.idx3-ubyte"
    label_path = tmp_path / "labels.idx1-ubyte"
    with open(image_path, "wb") as f:
        f.write(struct.pack(">iiii", 2051, 3, 28, 28))
        f.write(b"".join(images))
    with open(label_path, "wb") as f:
        f.write(struct.pack(">ii", 2049, 3))
        f.write(bytes(LABELS))
    code = main(["--images", str(image_path), "--labels", str(label_path),
                 "--epochs", "2", "--samples", "3", "--seed", "1"])
    assert code == 0
    assert capsys.readouterr().out.count("cost after one cycle") == 2


def test_main_missing_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["--images", str(tmp_path / "a"), "--labels", str(tmp_path / "b")])