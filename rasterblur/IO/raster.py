# -*- coding: utf-8 -*-
"""
Raster Reader - Decode common raster files into 8-bit image stacks.

Decodes any format Pillow understands (PNG, JPEG, BMP, TGA, GIF, ...)
into a ``(rows, cols, channels)`` ``uint8`` array with 1, 3 or 4
channels. Modes that do not map directly (palette, gray+alpha, CMYK,
16-bit, ...) are converted to RGB, RGBA or L first.

Dependencies
------------
Pillow

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
from pathlib import Path
from typing import List, Optional, Tuple, Union

# Third-party
import numpy as np
from PIL import Image, UnidentifiedImageError

# rasterblur internal
from rasterblur.exceptions import ImageIOError
from rasterblur.IO.base import ImageReader

logger = logging.getLogger(__name__)

_DIRECT_MODES = {'L': 1, 'RGB': 3, 'RGBA': 4}
_GRAY_MODES = ('1', 'I', 'I;16', 'I;16B', 'I;16L', 'F')
_ALPHA_MODES = ('LA', 'La', 'PA', 'RGBa')


def _target_mode(img: Image.Image) -> str:
    """Pillow mode the image is converted to before decoding."""
    if img.mode in _DIRECT_MODES:
        return img.mode
    if img.mode in _GRAY_MODES:
        return 'L'
    if img.mode in _ALPHA_MODES:
        return 'RGBA'
    if img.mode == 'P' and 'transparency' in img.info:
        return 'RGBA'
    return 'RGB'


class RasterReader(ImageReader):
    """Read 8-bit raster images through Pillow.

    Parameters
    ----------
    filepath : str or Path
        Path to the image file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ImageIOError
        If the file cannot be decoded as an image.

    Examples
    --------
    >>> from rasterblur.IO import RasterReader
    >>> with RasterReader('photo.png') as reader:
    ...     image = reader.read_full()
    >>> image.shape
    (480, 640, 3)
    """

    def _load_metadata(self) -> None:
        try:
            with Image.open(self.filepath) as img:
                mode = _target_mode(img)
                self.metadata = {
                    'format': img.format,
                    'source_mode': img.mode,
                    'mode': mode,
                    'rows': img.height,
                    'cols': img.width,
                    'channels': _DIRECT_MODES[mode],
                }
        except (UnidentifiedImageError, OSError) as e:
            raise ImageIOError(
                f"could not load image: {self.filepath}"
            ) from e
        logger.debug("Opened %s: %s", self.filepath, self.metadata)

    def _decode(self) -> np.ndarray:
        try:
            with Image.open(self.filepath) as img:
                if img.mode != self.metadata['mode']:
                    img = img.convert(self.metadata['mode'])
                data = np.asarray(img, dtype=np.uint8)
        except (UnidentifiedImageError, OSError) as e:
            raise ImageIOError(
                f"could not decode image: {self.filepath}"
            ) from e
        if data.ndim == 2:
            data = data[:, :, np.newaxis]
        return data

    def read_chip(
        self,
        row_start: int,
        row_end: int,
        col_start: int,
        col_end: int,
        bands: Optional[List[int]] = None,
    ) -> np.ndarray:
        """Read a spatial subset of the image.

        Raises
        ------
        ValueError
            If the window is empty or outside the image.
        """
        rows, cols, _ = self.get_shape()
        if not (0 <= row_start < row_end <= rows
                and 0 <= col_start < col_end <= cols):
            raise ValueError(
                f"chip [{row_start}:{row_end}, {col_start}:{col_end}] "
                f"is outside image of {rows} x {cols}"
            )
        data = self._decode()[row_start:row_end, col_start:col_end]
        if bands is not None:
            data = data[:, :, bands]
        return data

    def get_shape(self) -> Tuple[int, int, int]:
        return (
            self.metadata['rows'],
            self.metadata['cols'],
            self.metadata['channels'],
        )

    def get_dtype(self) -> np.dtype:
        return np.dtype(np.uint8)


def read_image(filepath: Union[str, Path]) -> np.ndarray:
    """Decode ``filepath`` into a ``(rows, cols, channels)`` uint8 array."""
    with RasterReader(filepath) as reader:
        return reader.read_full()
