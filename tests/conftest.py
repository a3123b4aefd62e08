# -*- coding: utf-8 -*-
"""
Shared test fixtures - Synthetic image stacks for filter tests.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-11

Modified
--------
2026-10-19
"""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(12345)


@pytest.fixture
def flat_image():
    """Constant 40x40 single-channel stack of value 100."""
    return np.full((40, 40, 1), 100.0)


@pytest.fixture
def random_image(rng):
    """Random 32x24 single-channel stack in [0, 255)."""
    return rng.uniform(0.0, 255.0, size=(32, 24, 1))


@pytest.fixture
def rgb_image(rng):
    """Random 20x30 three-channel stack in [0, 255)."""
    return rng.uniform(0.0, 255.0, size=(20, 30, 3))


@pytest.fixture
def rgba_raster(rng):
    """Random 16x12 four-channel uint8 raster."""
    return rng.integers(0, 256, size=(16, 12, 4), dtype=np.uint8)


@pytest.fixture
def impulse_image():
    """3x3 single-channel stack with a 255 outlier at the center."""
    image = np.zeros((3, 3, 1))
    image[1, 1, 0] = 255.0
    return image


@pytest.fixture
def step_image():
    """20x20 single-channel vertical step edge, 0 left and 200 right."""
    image = np.zeros((20, 20, 1))
    image[:, 10:, 0] = 200.0
    return image


@pytest.fixture
def salt_pepper_image(rng):
    """40x40 stack of value 100 with 5% salt-and-pepper noise."""
    image = np.full((40, 40, 1), 100.0)
    mask = rng.random((40, 40)) < 0.05
    noise = np.where(rng.random((40, 40)) < 0.5, 0.0, 255.0)
    image[mask, 0] = noise[mask]
    return image
