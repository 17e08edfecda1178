"""A small fully connected neural network trained on IDX digit data."""

__version__ = "0.1.0"
__all__ = ["cli", "imageloading", "network"]