# -*- coding: utf-8 -*-
"""
Bilateral Filter - Edge-preserving joint domain/range smoothing.

Each neighbor's spatial weight is multiplied by a range weight
``exp(-diff**2 / (2 sigma_range**2))`` where ``diff`` is the difference
between the center sample and the neighbor in the same channel. The
result is normalized per sample by the sum of the combined weights, so
the spatial kernel itself is left unnormalized. Large intensity steps
suppress the neighbors across them, which keeps edges sharp.

The center sample always contributes ``spatial(center) * 1``, so the
weight sum is positive whenever the spatial center weight is.

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
from typing import Annotated, Any, Callable, Optional

# Third-party
import numpy as np

# rasterblur internal
from rasterblur.exceptions import ValidationError
from rasterblur.image_processing.base import ChannelStackMixin, ImageTransform
from rasterblur.image_processing.kernels import bilateral_spatial_kernel
from rasterblur.image_processing.padding import pad_replicate
from rasterblur.image_processing.params import Desc, Range
from rasterblur.image_processing.versioning import (
    processor_tags,
    processor_version,
)
from rasterblur.image_processing.filters._validation import (
    validate_image,
    validate_kernel,
    validate_kernel_size,
    validate_positive,
)
from rasterblur.image_processing.filters.linear import working_dtype
from rasterblur.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


def bilateral(
    image: np.ndarray,
    spatial_kernel: np.ndarray,
    sigma_range: float,
    progress_callback: Optional[Callable[[float], None]] = None,
) -> np.ndarray:
    """Bilateral-filter ``image`` with the given spatial weights.

    Parameters
    ----------
    image : np.ndarray
        Source stack, shape ``(rows, cols, channels)``.
    spatial_kernel : np.ndarray
        Unnormalized spatial weights, shape ``(kh, kw, channels)``.
    sigma_range : float
        Intensity standard deviation of the range term. Must be > 0.
    progress_callback : callable, optional
        Called with the completed fraction after each kernel row.

    Returns
    -------
    np.ndarray
        Filtered stack, same shape as ``image``, float32 or float64.

    Raises
    ------
    ValidationError
        If the inputs are malformed, ``sigma_range`` is not positive, or
        the spatial weight aligned with the center sample is not
        positive.
    """
    validate_image(image)
    validate_kernel(spatial_kernel, image.shape[2])
    validate_positive(sigma_range, 'sigma_range')

    kh, kw = spatial_kernel.shape[:2]
    pad_h, pad_w = kh // 2, kw // 2
    if not np.all(spatial_kernel[pad_h, pad_w] > 0):
        raise ValidationError(
            "spatial kernel weight at the window center must be > 0"
        )

    dtype = working_dtype(image)
    rows, cols = image.shape[:2]
    center = image.astype(dtype, copy=False)
    padded = pad_replicate(center, pad_h, pad_w)
    weights = spatial_kernel.astype(dtype, copy=False)
    scale = dtype(2.0 * sigma_range * sigma_range)

    total = np.zeros(image.shape, dtype=dtype)
    weight_sum = np.zeros(image.shape, dtype=dtype)
    for i in range(kh):
        for j in range(kw):
            neighbor = padded[i:i + rows, j:j + cols]
            diff = center - neighbor
            weight = weights[i, j] * np.exp(-(diff * diff) / scale)
            total += weight * neighbor
            weight_sum += weight
        if progress_callback is not None:
            progress_callback((i + 1) / kh)
    return total / weight_sum


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.DENOISING,
                description='Edge-preserving bilateral smoothing')
class BilateralFilter(ChannelStackMixin, ImageTransform):
    """Edge-preserving bilateral filter.

    Parameters
    ----------
    kernel_size : int
        Square window side length in pixels. Default is 3.
    sigma_space : float
        Spatial standard deviation in pixels. Default is 2.0.
    sigma_range : float
        Intensity standard deviation, in sample units. Default is 50.0.
        Larger values approach a plain Gaussian blur.

    Examples
    --------
    >>> from rasterblur.image_processing.filters import BilateralFilter
    >>> f = BilateralFilter(kernel_size=5, sigma_space=2.0, sigma_range=30.0)
    >>> denoised = f.apply(image)
    """

    __gpu_compatible__ = True

    kernel_size: Annotated[int, Range(min=1),
                           Desc('Square window side length')] = 3
    sigma_space: Annotated[float, Range(min=0.0, min_exclusive=True),
                           Desc('Spatial standard deviation')] = 2.0
    sigma_range: Annotated[float, Range(min=0.0, min_exclusive=True),
                           Desc('Intensity standard deviation')] = 50.0

    def __init__(
        self,
        kernel_size: int = 3,
        sigma_space: float = 2.0,
        sigma_range: float = 50.0,
    ) -> None:
        self._init_params(
            kernel_size=kernel_size,
            sigma_space=sigma_space,
            sigma_range=sigma_range,
        )

    def _apply_3d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        params = self._resolve_params(kwargs)
        ks = params['kernel_size']
        validate_kernel_size(ks)
        validate_positive(params['sigma_space'], 'sigma_space')
        validate_image(source)
        logger.debug(
            "Bilateral filter, size %d, sigma_space %g, sigma_range %g, "
            "image %s", ks, params['sigma_space'], params['sigma_range'],
            source.shape,
        )
        kernel = bilateral_spatial_kernel(
            ks, params['sigma_space'], source.shape[2]
        )
        return bilateral(source, kernel, params['sigma_range'],
                         kwargs.get('progress_callback'))
