# -*- coding: utf-8 -*-
"""
Rank Filters - Median filtering over border-replicated windows.

``median`` takes, for every sample, the ``size * size`` window in the
same channel and picks the element at sorted index ``n // 2``. For odd
sizes that is the true median. For even sizes ``n`` is even and the upper
of the two middle elements is returned; the two are not averaged.
Backed by ``scipy.ndimage.median_filter`` with ``mode='nearest'``, one
call per channel.

Dependencies
------------
scipy

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
import logging
from typing import Annotated, Any, Callable, Optional

# Third-party
import numpy as np
from scipy.ndimage import median_filter

# rasterblur internal
from rasterblur.image_processing.base import ChannelStackMixin, ImageTransform
from rasterblur.image_processing.params import Desc, Range
from rasterblur.image_processing.versioning import (
    processor_tags,
    processor_version,
)
from rasterblur.image_processing.filters._validation import (
    validate_image,
    validate_kernel_size,
)
from rasterblur.image_processing.filters.linear import working_dtype
from rasterblur.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


def median(
    image: np.ndarray,
    size: int,
    progress_callback: Optional[Callable[[float], None]] = None,
) -> np.ndarray:
    """Median-filter ``image`` with a ``size x size`` window.

    Parameters
    ----------
    image : np.ndarray
        Source stack, shape ``(rows, cols, channels)``.
    size : int
        Window side length, >= 1.
    progress_callback : callable, optional
        Called with the completed fraction after each channel.

    Returns
    -------
    np.ndarray
        Filtered stack, same shape as ``image``, float32 or float64.

    Raises
    ------
    ValidationError
        If the image is malformed or ``size`` is not a positive integer.
    """
    validate_image(image)
    validate_kernel_size(size, 'size')

    working = image.astype(working_dtype(image), copy=False)
    channels = image.shape[2]

    out = np.empty(working.shape, dtype=working.dtype)
    for c in range(channels):
        out[:, :, c] = median_filter(working[:, :, c], size=size,
                                     mode='nearest')
        if progress_callback is not None:
            progress_callback((c + 1) / channels)
    return out


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.DENOISING,
                description='Rank-order median denoising')
class MedianFilter(ChannelStackMixin, ImageTransform):
    """Spatial median filter for impulse (salt-and-pepper) noise.

    Parameters
    ----------
    kernel_size : int
        Square window side length in pixels. Default is 3.

    Examples
    --------
    >>> from rasterblur.image_processing.filters import MedianFilter
    >>> denoised = MedianFilter(kernel_size=5).apply(noisy_image)
    """

    __gpu_compatible__ = False

    kernel_size: Annotated[int, Range(min=1),
                           Desc('Square window side length')] = 3

    def __init__(self, kernel_size: int = 3) -> None:
        self._init_params(kernel_size=kernel_size)

    def _apply_3d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        params = self._resolve_params(kwargs)
        ks = params['kernel_size']
        logger.debug("Median filter, size %d, image %s",
                     ks, getattr(source, 'shape', None))
        return median(source, ks, kwargs.get('progress_callback'))
