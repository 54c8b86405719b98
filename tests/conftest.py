from pathlib import Path

import numpy as np
import pytest
from PIL import Image


def make_gradient(width: int, height: int) -> Image.Image:
    """RGB-градиент: R по x, G по y, B константа."""
    xs = np.linspace(0, 255, num=width, dtype=np.float32)
    ys = np.linspace(0, 255, num=height, dtype=np.float32)
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    arr[:, :, 0] = xs[np.newaxis, :].astype(np.uint8)
    arr[:, :, 1] = ys[:, np.newaxis].astype(np.uint8)
    arr[:, :, 2] = 128
    return Image.fromarray(arr)


@pytest.fixture
def png_800x600(tmp_path) -> Path:
    path = tmp_path / "input.png"
    make_gradient(800, 600).save(path)
    return path


@pytest.fixture
def small_png(tmp_path) -> Path:
    path = tmp_path / "small.png"
    make_gradient(40, 30).save(path)
    return path
