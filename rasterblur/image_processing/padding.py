# -*- coding: utf-8 -*-
"""
Padding - Border-replicating extension of image stacks.

Filters pad their source once so every window lies inside the padded
array. Out-of-range rows and columns take the value of the nearest edge
sample: the source index is clamped per axis, not mirrored or wrapped.

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

# Third-party
import numpy as np

# rasterblur internal
from rasterblur.exceptions import ValidationError


def pad_replicate(image: np.ndarray, pad_h: int, pad_w: int) -> np.ndarray:
    """Return a border-replicated copy of ``image``.

    Output element ``[i, j]`` equals
    ``image[clip(i - pad_h, 0, rows - 1), clip(j - pad_w, 0, cols - 1)]``.
    Trailing (channel) axes are not padded.

    Parameters
    ----------
    image : np.ndarray
        Array whose first two axes are ``(rows, cols)``.
    pad_h : int
        Rows added above and below.
    pad_w : int
        Columns added left and right.

    Returns
    -------
    np.ndarray
        Shape ``(rows + 2*pad_h, cols + 2*pad_w, ...)``, same dtype.

    Raises
    ------
    ValidationError
        If either pad is negative.
    """
    if pad_h < 0 or pad_w < 0:
        raise ValidationError(
            f"pad sizes must be >= 0, got pad_h={pad_h}, pad_w={pad_w}"
        )
    widths = [(pad_h, pad_h), (pad_w, pad_w)]
    widths += [(0, 0)] * (image.ndim - 2)
    return np.pad(image, widths, mode='edge')
