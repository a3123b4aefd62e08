# -*- coding: utf-8 -*-
"""
Spatial Filters - Linear, bilateral and rank filters over image stacks.

All filters take ``(rows, cols, channels)`` stacks (or 2D single-channel
arrays), pad them by border replication, and return a new floating-point
array of the same shape. Channels are filtered independently.

Linear Filters
    ``BoxFilter`` — uniform averaging
    ``GaussianFilter`` — Gaussian smoothing, sigma tied to kernel size
    ``MotionFilter`` — directional line blur

Edge-preserving Filters
    ``BilateralFilter`` — spatial x range weighted average

Rank Filters
    ``MedianFilter`` — rank-based median (impulse noise removal)

The underlying functions ``convolve``, ``bilateral`` and ``median`` are
exported for callers that build their own kernels.

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

from rasterblur.image_processing.filters.linear import (
    BoxFilter,
    GaussianFilter,
    MotionFilter,
    convolve,
)
from rasterblur.image_processing.filters.bilateral import (
    BilateralFilter,
    bilateral,
)
from rasterblur.image_processing.filters.rank import MedianFilter, median

__all__ = [
    'BoxFilter',
    'GaussianFilter',
    'MotionFilter',
    'BilateralFilter',
    'MedianFilter',
    'convolve',
    'bilateral',
    'median',
]
