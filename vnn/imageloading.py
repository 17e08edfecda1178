"""Reading IDX image and label files and displaying grayscale images."""

from __future__ import annotations

import os
import struct
from typing import BinaryIO, Sequence

IMAGE_MAGIC = 2051
LABEL_MAGIC = 2049

_SHOW_DELAY_MS = 2000


def read_int(stream: BinaryIO) -> int:
    """Read one big-endian 32-bit signed integer from a binary stream."""
    data = stream.read(4)
    if len(data) != 4:
        raise ValueError("Unexpected end of file while reading an integer")
    return struct.unpack(">i", data)[0]


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ValueError(f"Unexpected end of file while reading {what}")
    return data


def read_images(path: str | os.PathLike[str]) -> list[bytes]:
    """Read an IDX3 image file and return one bytes object of pixels per image."""
    with open(path, "rb") as stream:
        if read_int(stream) != IMAGE_MAGIC:
            raise ValueError("Invalid image file!")
        count = read_int(stream)
        rows = read_int(stream)
        cols = read_int(stream)
        if count < 0 or rows < 0 or cols < 0:
            raise ValueError("Invalid image file!")
        size = rows * cols
        return [_read_exact(stream, size, "image data") for _ in range(count)]


def read_labels(path: str | os.PathLike[str]) -> bytes:
    """Read an IDX1 label file and return its labels as bytes."""
    with open(path, "rb") as stream:
        if read_int(stream) != LABEL_MAGIC:
            raise ValueError("Invalid label file!")
        count = read_int(stream)
        if count < 0:
            raise ValueError("Invalid label file!")
        return _read_exact(stream, count, "label data")


def grayscale_to_argb(pixels: Sequence[int], width: int, height: int) -> list[int]:
    """Convert 8-bit grayscale pixels to opaque ARGB8888 values."""
    size = width * height
    if len(pixels) < size:
        raise ValueError(f"Expected {size} pixels, got {len(pixels)}")
    return [0xFF000000 | (v << 16) | (v << 8) | v for v in pixels[:size]]


def show_image(pixels: Sequence[int], width: int, height: int) -> None:
    """Show a grayscale image in a window for two seconds."""
    import pygame

    argb = grayscale_to_argb(pixels, width, height)
    rgb = bytes(channel for value in argb for channel in (
        (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Image")
        image = pygame.image.frombuffer(rgb, (width, height), "RGB")
        screen.fill((0, 0, 0))
        screen.blit(image, (0, 0))
        pygame.display.flip()
        pygame.time.delay(_SHOW_DELAY_MS)
    finally:
        pygame.quit()