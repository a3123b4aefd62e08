# -*- coding: utf-8 -*-
"""
Filter Validation Helpers - Shared image, kernel and parameter checks.

Every filtering entry point calls these helpers before any per-pixel work
so that structurally invalid input fails fast with a message naming the
offending parameter. Kernel factories themselves do not validate; a zero
or negative size or sigma must be rejected here first.

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

# Standard library
import math

# Third-party
import numpy as np

# rasterblur internal
from rasterblur.exceptions import ValidationError


SUPPORTED_CHANNELS = (1, 3, 4)


def validate_kernel_size(kernel_size: int, name: str = 'kernel_size') -> None:
    """Validate that kernel size is a positive integer.

    Even sizes are accepted; they compute with an off-center window.

    Raises
    ------
    ValidationError
        If ``kernel_size`` is not an integer or is less than 1.
    """
    if isinstance(kernel_size, bool) or not isinstance(
        kernel_size, (int, np.integer)
    ):
        raise ValidationError(
            f"{name} must be an integer, got {type(kernel_size).__name__}"
        )
    if kernel_size < 1:
        raise ValidationError(
            f"{name} must be >= 1, got {kernel_size}"
        )


def validate_positive(value: float, name: str) -> None:
    """Validate that a scale parameter (a sigma) is finite and > 0.

    Raises
    ------
    ValidationError
        If ``value`` is not a real number, not finite, or not positive.
    """
    if isinstance(value, bool) or not isinstance(
        value, (int, float, np.integer, np.floating)
    ):
        raise ValidationError(
            f"{name} must be a number, got {type(value).__name__}"
        )
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(
            f"{name} must be a finite value > 0, got {value!r}"
        )


def validate_image(image: np.ndarray) -> None:
    """Validate a ``(rows, cols, channels)`` image stack.

    Raises
    ------
    ValidationError
        If ``image`` is missing, not a real-valued 3D array, empty, or
        has a channel count other than 1, 3 or 4.
    """
    if image is None:
        raise ValidationError("image is required, got None")
    if not isinstance(image, np.ndarray):
        raise ValidationError(
            f"image must be a numpy array, got {type(image).__name__}"
        )
    if image.ndim != 3:
        raise ValidationError(
            f"image must have shape (rows, cols, channels), "
            f"got shape {image.shape}"
        )
    rows, cols, channels = image.shape
    if rows < 1 or cols < 1:
        raise ValidationError(
            f"image must have at least one row and column, "
            f"got shape {image.shape}"
        )
    if channels not in SUPPORTED_CHANNELS:
        raise ValidationError(
            f"image channel count must be one of {SUPPORTED_CHANNELS}, "
            f"got {channels}"
        )
    if not (np.issubdtype(image.dtype, np.integer)
            or np.issubdtype(image.dtype, np.floating)):
        raise ValidationError(
            f"image dtype must be integer or floating, got {image.dtype}"
        )


def validate_kernel(kernel: np.ndarray, channels: int) -> None:
    """Validate a ``(rows, cols, channels)`` weight grid against an image.

    Raises
    ------
    ValidationError
        If ``kernel`` is not 3D, is empty, or its channel count differs
        from ``channels``.
    """
    if not isinstance(kernel, np.ndarray) or kernel.ndim != 3:
        raise ValidationError(
            "kernel must be a numpy array of shape (rows, cols, channels)"
        )
    if kernel.shape[0] < 1 or kernel.shape[1] < 1:
        raise ValidationError(
            f"kernel must not be empty, got shape {kernel.shape}"
        )
    if kernel.shape[2] != channels:
        raise ValidationError(
            f"kernel has {kernel.shape[2]} channels but image has "
            f"{channels}"
        )
