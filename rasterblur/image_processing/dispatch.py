# -*- coding: utf-8 -*-
"""
Filter Dispatch - Map a ``FilterConfig`` to a ready-to-run processor.

``build_filter`` branches over every ``FilterAlgorithm`` member. ``blur``
is the one-call entry point: validate, filter, and quantize to ``uint8``.

Author
------
Steven Siebert

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
from typing import Any, Dict, Optional, Type

# Third-party
import numpy as np

# rasterblur internal
from rasterblur.config import FilterConfig
from rasterblur.exceptions import ValidationError
from rasterblur.image_processing.base import ImageTransform
from rasterblur.image_processing.filters import (
    BilateralFilter,
    BoxFilter,
    GaussianFilter,
    MedianFilter,
    MotionFilter,
)
from rasterblur.image_processing.filters._validation import validate_image
from rasterblur.image_processing.pipeline import Pipeline
from rasterblur.image_processing.quantize import Quantizer
from rasterblur.vocabulary import FilterAlgorithm

logger = logging.getLogger(__name__)

# Processor class behind each algorithm
FILTER_PROCESSORS: Dict[FilterAlgorithm, Type[ImageTransform]] = {
    FilterAlgorithm.GAUSSIAN: GaussianFilter,
    FilterAlgorithm.BOX: BoxFilter,
    FilterAlgorithm.BILATERAL: BilateralFilter,
    FilterAlgorithm.MEDIAN: MedianFilter,
    FilterAlgorithm.MOTION: MotionFilter,
}


def build_filter(config: FilterConfig) -> ImageTransform:
    """Instantiate the processor selected by ``config``.

    Parameters
    ----------
    config : FilterConfig
        Validated configuration.

    Returns
    -------
    ImageTransform
        The configured filter.
    """
    algorithm = config.algorithm
    if algorithm is FilterAlgorithm.GAUSSIAN:
        return GaussianFilter(kernel_size=config.strength)
    if algorithm is FilterAlgorithm.BOX:
        return BoxFilter(kernel_size=config.strength)
    if algorithm is FilterAlgorithm.BILATERAL:
        return BilateralFilter(
            kernel_size=config.strength,
            sigma_space=config.sigma_space,
            sigma_range=config.sigma_range,
        )
    if algorithm is FilterAlgorithm.MEDIAN:
        return MedianFilter(kernel_size=config.strength)
    if algorithm is FilterAlgorithm.MOTION:
        return MotionFilter(
            kernel_size=config.strength,
            direction=config.motion_direction,
        )
    raise ValidationError(f"Unsupported filter algorithm: {algorithm!r}")


def blur(
    image: np.ndarray,
    config: Optional[FilterConfig] = None,
    rounding: str = 'round',
    **kwargs: Any,
) -> np.ndarray:
    """Filter a decoded raster and quantize the result to ``uint8``.

    Parameters
    ----------
    image : np.ndarray
        ``(rows, cols)`` or ``(rows, cols, channels)`` raster with 1, 3
        or 4 channels.
    config : FilterConfig, optional
        Filter selection. Defaults to ``FilterConfig()`` (3x3 Gaussian).
    rounding : str
        Quantizer policy, ``'round'`` or ``'truncate'``.
    **kwargs
        Forwarded to ``Pipeline.apply`` (e.g. ``progress_callback``).

    Returns
    -------
    np.ndarray
        ``uint8`` raster with the same shape as ``image``.

    Raises
    ------
    ValidationError
        If ``image`` is absent or malformed.
    """
    if image is None:
        raise ValidationError("image is required, got None")
    image = np.asarray(image)
    config = config if config is not None else FilterConfig()
    validate_image(image[:, :, np.newaxis] if image.ndim == 2 else image)

    pipe = Pipeline([build_filter(config), Quantizer(rounding=rounding)])
    logger.info("Applying %s (strength %d) to image %s",
                config.algorithm.value, config.strength, image.shape)
    return pipe.apply(image, **kwargs)
