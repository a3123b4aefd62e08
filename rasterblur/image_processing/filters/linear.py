# -*- coding: utf-8 -*-
"""
Linear Spatial Filters - Box, Gaussian, and motion-blur convolution.

``convolve`` correlates an image stack with a ``(rows, cols, channels)``
kernel, replicating border samples. Each output sample is the weighted
sum of its window in the same channel; channels never mix and the kernel
is not flipped. Backed by ``scipy.ndimage.correlate`` with
``mode='nearest'``, one call per channel. Even-sized kernels are anchored
at ``size // 2``, so the window extends one sample further up and left.

- ``BoxFilter``: uniform averaging
- ``GaussianFilter``: Gaussian smoothing with ``sigma = max(size/2, 1)``
- ``MotionFilter``: directional line blur

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
from scipy.ndimage import correlate

# rasterblur internal
from rasterblur.image_processing.base import ChannelStackMixin, ImageTransform
from rasterblur.image_processing.kernels import (
    box_kernel,
    gaussian_kernel,
    motion_kernel,
)
from rasterblur.image_processing.params import Desc, Range
from rasterblur.image_processing.versioning import (
    processor_tags,
    processor_version,
)
from rasterblur.image_processing.filters._validation import (
    validate_image,
    validate_kernel,
    validate_kernel_size,
)
from rasterblur.vocabulary import MotionDirection, ProcessorCategory

logger = logging.getLogger(__name__)


def working_dtype(source: np.ndarray) -> type:
    """Floating dtype used for filtering ``source``.

    float64 input stays float64; everything else is computed in float32.
    """
    if source.dtype == np.float64:
        return np.float64
    return np.float32


def convolve(
    image: np.ndarray,
    kernel: np.ndarray,
    progress_callback: Optional[Callable[[float], None]] = None,
) -> np.ndarray:
    """Correlate ``image`` with ``kernel`` using border replication.

    Parameters
    ----------
    image : np.ndarray
        Source stack, shape ``(rows, cols, channels)``.
    kernel : np.ndarray
        Weights, shape ``(kh, kw, channels)``.
    progress_callback : callable, optional
        Called with the completed fraction after each channel.

    Returns
    -------
    np.ndarray
        Filtered stack, same shape as ``image``, float32 or float64.

    Raises
    ------
    ValidationError
        If the image or kernel is malformed or their channel counts
        differ.
    """
    validate_image(image)
    validate_kernel(kernel, image.shape[2])

    working = image.astype(working_dtype(image), copy=False)
    channels = image.shape[2]

    out = np.empty(working.shape, dtype=working.dtype)
    for c in range(channels):
        out[:, :, c] = correlate(working[:, :, c], kernel[:, :, c],
                                 mode='nearest')
        if progress_callback is not None:
            progress_callback((c + 1) / channels)
    return out


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.SMOOTHING,
                description='Uniform box averaging')
class BoxFilter(ChannelStackMixin, ImageTransform):
    """Spatial mean (box) filter.

    Replaces each sample with the arithmetic mean of the
    ``kernel_size x kernel_size`` window around it.

    Parameters
    ----------
    kernel_size : int
        Square kernel side length in pixels. Default is 3.

    Examples
    --------
    >>> from rasterblur.image_processing.filters import BoxFilter
    >>> smoothed = BoxFilter(kernel_size=5).apply(image)
    """

    __gpu_compatible__ = False

    kernel_size: Annotated[int, Range(min=1),
                           Desc('Square kernel side length')] = 3

    def __init__(self, kernel_size: int = 3) -> None:
        self._init_params(kernel_size=kernel_size)

    def _apply_3d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        params = self._resolve_params(kwargs)
        ks = params['kernel_size']
        validate_kernel_size(ks)
        validate_image(source)
        logger.debug("Box filter, size %d, image %s", ks, source.shape)
        return convolve(source, box_kernel(ks, source.shape[2]),
                        kwargs.get('progress_callback'))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.SMOOTHING,
                description='Gaussian smoothing')
class GaussianFilter(ChannelStackMixin, ImageTransform):
    """Gaussian smoothing filter.

    The standard deviation follows the kernel size,
    ``sigma = max(kernel_size / 2, 1)``, and the kernel is renormalized
    to sum to 1.

    Parameters
    ----------
    kernel_size : int
        Square kernel side length in pixels. Default is 3.

    Examples
    --------
    >>> from rasterblur.image_processing.filters import GaussianFilter
    >>> smoothed = GaussianFilter(kernel_size=7).apply(image)
    """

    __gpu_compatible__ = False

    kernel_size: Annotated[int, Range(min=1),
                           Desc('Square kernel side length')] = 3

    def __init__(self, kernel_size: int = 3) -> None:
        self._init_params(kernel_size=kernel_size)

    def _apply_3d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        params = self._resolve_params(kwargs)
        ks = params['kernel_size']
        validate_kernel_size(ks)
        validate_image(source)
        logger.debug("Gaussian filter, size %d, image %s", ks, source.shape)
        return convolve(source, gaussian_kernel(ks, source.shape[2]),
                        kwargs.get('progress_callback'))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.BLUR,
                description='Directional motion blur')
class MotionFilter(ChannelStackMixin, ImageTransform):
    """Linear motion blur along one direction.

    Averages ``kernel_size`` samples along a vertical, horizontal or
    diagonal line. The line starts at the top-left of the window, so the
    blur trails to one side rather than being centered.

    Parameters
    ----------
    kernel_size : int
        Blur length in pixels. Default is 3.
    direction : MotionDirection or str
        ``'vertical'``, ``'horizontal'`` or ``'diagonal'``. Required.

    Examples
    --------
    >>> from rasterblur.image_processing.filters import MotionFilter
    >>> streaked = MotionFilter(kernel_size=9, direction='horizontal').apply(image)
    """

    __gpu_compatible__ = False

    kernel_size: Annotated[int, Range(min=1),
                           Desc('Blur length in pixels')] = 3
    direction: Annotated[MotionDirection, Desc('Blur direction')]

    def __init__(
        self,
        kernel_size: int = 3,
        direction: Optional[MotionDirection] = None,
    ) -> None:
        self._init_params(kernel_size=kernel_size, direction=direction)

    def _apply_3d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        params = self._resolve_params(kwargs)
        ks = params['kernel_size']
        direction = params['direction']
        validate_kernel_size(ks)
        validate_image(source)
        logger.debug("Motion filter, size %d, %s, image %s",
                     ks, direction.value, source.shape)
        return convolve(source, motion_kernel(ks, direction, source.shape[2]),
                        kwargs.get('progress_callback'))
