# -*- coding: utf-8 -*-
"""
Exception Hierarchy - Domain-specific exceptions for rasterblur operations.

Lets callers (the CLI, or any embedding application) catch rasterblur
errors distinctly from Python built-in exceptions. Every exception
subclasses both ``RasterBlurError`` and the matching built-in so that
``except ValueError`` style handlers keep working.

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
2026-02-06

Modified
--------
2026-10-19
"""


class RasterBlurError(Exception):
    """Base exception for all rasterblur errors."""


class ValidationError(RasterBlurError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for non-positive kernel sizes and sigmas, missing or unknown
    motion directions, images with an unsupported shape or channel
    count, kernel/image channel mismatches, and unsupported output
    formats. Always raised before any per-pixel work starts.
    """


class ProcessorError(RasterBlurError, RuntimeError):
    """Algorithm failure during ``apply()``.

    Raised when a processor meets data it cannot handle (for example
    non-finite samples reaching the quantizer), as opposed to an input
    validation issue.
    """


class ImageIOError(RasterBlurError, OSError):
    """Raster decode or encode failure.

    Raised when a source file exists but cannot be decoded, or when the
    encoder refuses the data being written.
    """
