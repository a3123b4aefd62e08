# -*- coding: utf-8 -*-
"""
Quantization - Float image stacks back to 8-bit samples for encoding.

Samples are rounded half-up (``floor(x + 0.5)``) by default, or truncated
toward zero with ``rounding='truncate'``, and then always clamped to
``[0, 255]`` before the cast to ``uint8``. Out-of-range values therefore
saturate instead of wrapping. Non-finite samples are an error.

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
from typing import Annotated, Any

# Third-party
import numpy as np

# rasterblur internal
from rasterblur.exceptions import ProcessorError, ValidationError
from rasterblur.image_processing.base import ImageTransform
from rasterblur.image_processing.params import Desc, Options
from rasterblur.image_processing.versioning import (
    processor_tags,
    processor_version,
)
from rasterblur.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)

ROUNDING_MODES = ('round', 'truncate')


def quantize(image: np.ndarray, rounding: str = 'round') -> np.ndarray:
    """Convert samples to ``uint8`` with rounding and saturation.

    Parameters
    ----------
    image : np.ndarray
        Array of any shape.
    rounding : str
        ``'round'`` (half-up, default) or ``'truncate'`` (toward zero).

    Returns
    -------
    np.ndarray
        ``uint8`` array of the same shape.

    Raises
    ------
    ValidationError
        If ``rounding`` is not a supported mode.
    ProcessorError
        If ``image`` contains NaN or infinite samples.
    """
    if rounding not in ROUNDING_MODES:
        raise ValidationError(
            f"rounding must be one of {ROUNDING_MODES}, got {rounding!r}"
        )
    data = np.asarray(image)
    if data.dtype == np.uint8:
        return data.copy()

    data = data.astype(np.float64)
    if not np.all(np.isfinite(data)):
        raise ProcessorError(
            f"cannot quantize {np.count_nonzero(~np.isfinite(data))} "
            f"non-finite sample(s)"
        )
    if rounding == 'round':
        data = np.floor(data + 0.5)
    else:
        data = np.trunc(data)
    return np.clip(data, 0, 255).astype(np.uint8)


def to_bytes(image: np.ndarray, rounding: str = 'round') -> bytes:
    """Row-major, channel-interleaved 8-bit buffer of ``image``.

    Float input is quantized first; ``uint8`` input is used as is.
    """
    return np.ascontiguousarray(quantize(image, rounding)).tobytes()


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.QUANTIZATION,
                description='Round and clamp samples to uint8')
class Quantizer(ImageTransform):
    """Final pipeline step producing an encodable ``uint8`` raster.

    Parameters
    ----------
    rounding : str
        ``'round'`` or ``'truncate'``. Default ``'round'``.

    Examples
    --------
    >>> from rasterblur.image_processing import Pipeline, Quantizer
    >>> from rasterblur.image_processing.filters import GaussianFilter
    >>> pipe = Pipeline([GaussianFilter(kernel_size=5), Quantizer()])
    >>> raster = pipe.apply(image)
    """

    __gpu_compatible__ = True

    rounding: Annotated[str, Options(*ROUNDING_MODES),
                        Desc('Float to integer policy')] = 'round'

    def __init__(self, rounding: str = 'round') -> None:
        self._init_params(rounding=rounding)

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        params = self._resolve_params(kwargs)
        result = quantize(source, params['rounding'])
        self._report_progress(kwargs, 1.0)
        return result
