# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for rasterblur.

Single source of truth for the controlled vocabularies used across the
package: filter algorithms, motion-blur directions, processor categories,
and output formats. Dispatch over these enums is exhaustive, so adding a
filter means adding a member here and a branch in
``rasterblur.image_processing.dispatch``.

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
2026-02-10

Modified
--------
2026-10-19
"""

from enum import Enum


class FilterAlgorithm(Enum):
    """Spatial filter families selectable from a ``FilterConfig``."""

    GAUSSIAN = "gaussian"
    BOX = "box"
    BILATERAL = "bilateral"
    MEDIAN = "median"
    MOTION = "motion"


class MotionDirection(Enum):
    """Line orientation of a motion-blur kernel."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    DIAGONAL = "diagonal"


class ProcessorCategory(Enum):
    """Processing categories for processor tagging."""

    SMOOTHING = "smoothing"
    DENOISING = "denoising"
    BLUR = "blur"
    QUANTIZATION = "quantization"


class OutputFormat(Enum):
    """Supported output file formats.

    Used by ``rasterblur.IO.get_writer`` to select the appropriate
    ``ImageWriter`` implementation.
    """

    PNG = "png"
    JPEG = "jpeg"
