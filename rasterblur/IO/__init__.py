# -*- coding: utf-8 -*-
"""
IO Module - Raster decode and encode.

Decoding goes through ``RasterReader`` (any format Pillow reads). Encoding
is format specific: ``PngWriter`` and ``JpegWriter``, selected by name
through ``get_writer`` or by output-path extension through
``writer_for_path``.

Dependencies
------------
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

# Standard library
import importlib
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Third-party
import numpy as np

# rasterblur internal
from rasterblur.exceptions import ValidationError
from rasterblur.IO.base import ImageReader, ImageWriter
from rasterblur.IO.raster import RasterReader, read_image
from rasterblur.vocabulary import OutputFormat


# Writer registry: maps formats to (module_path, class_name)
_WRITER_REGISTRY: Dict[OutputFormat, tuple] = {
    OutputFormat.PNG: ('rasterblur.IO.png', 'PngWriter'),
    OutputFormat.JPEG: ('rasterblur.IO.jpeg', 'JpegWriter'),
}

# Output-path extensions (lower case, without the dot)
_EXTENSIONS: Dict[str, OutputFormat] = {
    'png': OutputFormat.PNG,
    'jpg': OutputFormat.JPEG,
    'jpeg': OutputFormat.JPEG,
}


def get_writer(
    format: Union[OutputFormat, str],
    filepath: Union[str, Path],
    metadata: Optional[Dict[str, Any]] = None,
) -> ImageWriter:
    """Create an ImageWriter for the given format.

    Parameters
    ----------
    format : OutputFormat or str
        ``'png'`` or ``'jpeg'``.
    filepath : str or Path
        Output file path.
    metadata : dict, optional
        Writer options passed to the writer constructor.

    Returns
    -------
    ImageWriter
        Concrete writer instance for the requested format.

    Raises
    ------
    ValidationError
        If *format* is not a supported output format.
    """
    try:
        fmt = OutputFormat(format)
    except ValueError:
        supported = ', '.join(f.value for f in OutputFormat)
        raise ValidationError(
            f"Unsupported output format {format!r} (supported: {supported})"
        ) from None
    module_path, class_name = _WRITER_REGISTRY[fmt]
    module = importlib.import_module(module_path)
    writer_cls = getattr(module, class_name)
    return writer_cls(filepath, metadata)


def format_for_path(filepath: Union[str, Path]) -> OutputFormat:
    """Output format implied by the extension of *filepath*.

    Raises
    ------
    ValidationError
        If the extension is missing or not one of png, jpg, jpeg.
    """
    extension = Path(filepath).suffix.lstrip('.').lower()
    if extension not in _EXTENSIONS:
        raise ValidationError(
            f"Unsupported output file format for {str(filepath)!r}. "
            f"Please use .png or .jpg/.jpeg"
        )
    return _EXTENSIONS[extension]


def writer_for_path(
    filepath: Union[str, Path],
    metadata: Optional[Dict[str, Any]] = None,
) -> ImageWriter:
    """Create the writer matching the extension of *filepath*."""
    return get_writer(format_for_path(filepath), filepath, metadata)


def write_image(
    filepath: Union[str, Path],
    data: np.ndarray,
    metadata: Optional[Dict[str, Any]] = None,
) -> None:
    """Encode *data* to *filepath*, format chosen by extension."""
    with writer_for_path(filepath, metadata) as writer:
        writer.write(data)


__all__ = [
    'ImageReader',
    'ImageWriter',
    'RasterReader',
    'read_image',
    'get_writer',
    'format_for_path',
    'writer_for_path',
    'write_image',
]
