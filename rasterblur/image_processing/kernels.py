# -*- coding: utf-8 -*-
"""
Kernel Factory - Weight grids for the linear and bilateral filters.

Every factory returns a float64 array of shape ``(size, size, channels)``
holding the same 2D grid in every channel. The window center used by the
gaussian and bilateral grids is ``k = (size - 1) // 2``, so even sizes give
an off-center grid; that is accepted rather than corrected.

- ``box_kernel``: uniform ``1 / size**2``
- ``gaussian_kernel``: isotropic Gaussian, sigma ``max(size / 2, 1)``,
  renormalized to sum to 1
- ``bilateral_spatial_kernel``: unnormalized spatial Gaussian, the
  bilateral filter normalizes per pixel
- ``motion_kernel``: a single line of ``1 / size`` weights

No factory validates its inputs; callers reject non-positive sizes and
sigmas beforehand (see ``filters._validation``).

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
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import logging
from typing import Union

# Third-party
import numpy as np

# rasterblur internal
from rasterblur.vocabulary import MotionDirection

logger = logging.getLogger(__name__)


def _broadcast_channels(grid: np.ndarray, channels: int) -> np.ndarray:
    return np.repeat(grid[:, :, np.newaxis], channels, axis=2)


def _squared_distance(size: int) -> np.ndarray:
    k = (size - 1) // 2
    i, j = np.indices((size, size), dtype=np.float64)
    return (i - k) ** 2 + (j - k) ** 2


def box_kernel(size: int, channels: int = 1) -> np.ndarray:
    """Uniform averaging kernel with every weight ``1 / size**2``.

    Parameters
    ----------
    size : int
        Kernel side length.
    channels : int
        Number of channel planes. Default 1.

    Returns
    -------
    np.ndarray
        Shape ``(size, size, channels)``, sums to 1 per channel.
    """
    grid = np.full((size, size), 1.0 / (size * size), dtype=np.float64)
    return _broadcast_channels(grid, channels)


def gaussian_kernel(size: int, channels: int = 1) -> np.ndarray:
    """Isotropic Gaussian kernel normalized to unit sum.

    Uses ``sigma = max(size / 2, 1)`` and weights
    ``exp(-d**2 / (2 sigma**2)) / (2 pi sigma**2)`` where ``d`` is the
    distance to the center, then divides by the sum of those weights.

    Parameters
    ----------
    size : int
        Kernel side length.
    channels : int
        Number of channel planes. Default 1.

    Returns
    -------
    np.ndarray
        Shape ``(size, size, channels)``, sums to 1 per channel and is
        symmetric under 180 degree rotation.
    """
    sigma = max(size / 2.0, 1.0)
    grid = np.exp(-_squared_distance(size) / (2.0 * sigma * sigma))
    grid /= 2.0 * np.pi * sigma * sigma
    grid /= grid.sum()
    return _broadcast_channels(grid, channels)


def bilateral_spatial_kernel(
    size: int,
    sigma_space: float,
    channels: int = 1,
) -> np.ndarray:
    """Spatial (domain) weights of the bilateral filter.

    ``weight(i, j) = exp(-d**2 / (2 sigma_space**2))``, peak 1 at the
    center. Not normalized.

    Parameters
    ----------
    size : int
        Kernel side length.
    sigma_space : float
        Spatial standard deviation in pixels.
    channels : int
        Number of channel planes. Default 1.

    Returns
    -------
    np.ndarray
        Shape ``(size, size, channels)``.
    """
    grid = np.exp(
        -_squared_distance(size) / (2.0 * sigma_space * sigma_space)
    )
    return _broadcast_channels(grid, channels)


def motion_kernel(
    size: int,
    direction: Union[MotionDirection, str],
    channels: int = 1,
) -> np.ndarray:
    """Directional line kernel approximating linear motion blur.

    All weights are zero except ``1 / size`` along column 0
    (``vertical``), row 0 (``horizontal``) or the main diagonal
    (``diagonal``). An unrecognized direction yields an all-zero kernel;
    this is a factory-level fallback only, since ``FilterConfig`` and
    ``MotionFilter`` reject unknown directions before a kernel is built.

    Parameters
    ----------
    size : int
        Kernel side length (blur length).
    direction : MotionDirection or str
        Line orientation.
    channels : int
        Number of channel planes. Default 1.

    Returns
    -------
    np.ndarray
        Shape ``(size, size, channels)``.
    """
    grid = np.zeros((size, size), dtype=np.float64)
    value = 1.0 / size
    try:
        direction = MotionDirection(direction)
    except ValueError:
        logger.debug("Unknown motion direction %r, kernel is all zero",
                     direction)
        return _broadcast_channels(grid, channels)

    if direction is MotionDirection.VERTICAL:
        grid[:, 0] = value
    elif direction is MotionDirection.HORIZONTAL:
        grid[0, :] = value
    elif direction is MotionDirection.DIAGONAL:
        np.fill_diagonal(grid, value)
    return _broadcast_channels(grid, channels)
