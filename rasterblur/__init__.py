# -*- coding: utf-8 -*-
"""
rasterblur - Spatial filtering of raster images.

Border-replicated box, Gaussian, bilateral, median and motion-blur filters
over ``(rows, cols, channels)`` numpy stacks, with 8-bit quantization and
Pillow-backed decode/encode.

>>> import rasterblur
>>> raster = rasterblur.read_image('photo.png')
>>> config = rasterblur.FilterConfig(algorithm='bilateral', strength=5)
>>> rasterblur.write_image('smooth.png', rasterblur.blur(raster, config))

Dependencies
------------
numpy
Pillow

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from rasterblur.exceptions import (
    RasterBlurError,
    ValidationError,
    ProcessorError,
    ImageIOError,
)
from rasterblur.vocabulary import (
    FilterAlgorithm,
    MotionDirection,
    ProcessorCategory,
    OutputFormat,
)
from rasterblur.config import FilterConfig
from rasterblur.image_processing.dispatch import blur, build_filter
from rasterblur.IO import read_image, write_image

__all__ = [
    'RasterBlurError',
    'ValidationError',
    'ProcessorError',
    'ImageIOError',
    'FilterAlgorithm',
    'MotionDirection',
    'ProcessorCategory',
    'OutputFormat',
    'FilterConfig',
    'blur',
    'build_filter',
    'read_image',
    'write_image',
]
