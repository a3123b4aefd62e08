# -*- coding: utf-8 -*-
"""
Image Processing - Processor framework, kernels, filters and quantization.

Base Classes
    ``ImageProcessor``, ``ImageTransform``, ``ChannelStackMixin``

Building Blocks
    ``pad_replicate`` — border-replicating padding
    ``box_kernel``, ``gaussian_kernel``, ``bilateral_spatial_kernel``,
    ``motion_kernel`` — kernel factories
    ``quantize``, ``to_bytes``, ``Quantizer`` — float to ``uint8``

Composition
    ``Pipeline`` — sequential chain of transforms

Filters live in :mod:`rasterblur.image_processing.filters`; config-driven
dispatch lives in :mod:`rasterblur.image_processing.dispatch`.

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
2026-01-30

Modified
--------
2026-10-19
"""

from rasterblur.image_processing.base import (
    ChannelStackMixin,
    ImageProcessor,
    ImageTransform,
)
from rasterblur.image_processing.kernels import (
    bilateral_spatial_kernel,
    box_kernel,
    gaussian_kernel,
    motion_kernel,
)
from rasterblur.image_processing.padding import pad_replicate
from rasterblur.image_processing.pipeline import Pipeline
from rasterblur.image_processing.quantize import Quantizer, quantize, to_bytes
from rasterblur.image_processing.versioning import (
    processor_tags,
    processor_version,
)

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'ChannelStackMixin',
    'pad_replicate',
    'box_kernel',
    'gaussian_kernel',
    'bilateral_spatial_kernel',
    'motion_kernel',
    'Pipeline',
    'Quantizer',
    'quantize',
    'to_bytes',
    'processor_version',
    'processor_tags',
]
