# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interfaces for raster readers and writers.

Readers decode a file into a ``(rows, cols, channels)`` ``uint8`` array;
writers encode such an array. Concrete implementations are backed by
Pillow.

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

import warnings
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np
from PIL import Image

from rasterblur.image_processing.quantize import quantize


class ImageReader(ABC):
    """
    Abstract base class for all raster readers.

    Attributes
    ----------
    filepath : Path
        Path to the image file
    metadata : Dict[str, Any]
        Image metadata extracted from the file
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        """
        Initialize the image reader.

        Parameters
        ----------
        filepath : Union[str, Path]
            Path to the image file

        Raises
        ------
        FileNotFoundError
            If the specified filepath does not exist
        """
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")

        self.metadata: Dict[str, Any] = {}
        self._load_metadata()

    @abstractmethod
    def _load_metadata(self) -> None:
        """
        Populate ``self.metadata`` with dimensions, channel count and
        source format, without decoding pixel data.
        """
        pass

    @abstractmethod
    def read_chip(
        self,
        row_start: int,
        row_end: int,
        col_start: int,
        col_end: int,
        bands: Optional[List[int]] = None
    ) -> np.ndarray:
        """
        Read a spatial subset (chip) of the image.

        Parameters
        ----------
        row_start, row_end : int
            Row range, start inclusive, end exclusive
        col_start, col_end : int
            Column range, start inclusive, end exclusive
        bands : Optional[List[int]], default=None
            Channel indices to read. If None, read all channels.

        Returns
        -------
        np.ndarray
            Image data with shape (rows, cols, channels)

        Raises
        ------
        ValueError
            If indices are out of bounds or invalid
        """
        pass

    def read_full(self, bands: Optional[List[int]] = None) -> np.ndarray:
        """
        Read the entire image.

        Parameters
        ----------
        bands : Optional[List[int]], default=None
            Channel indices to read. If None, read all channels.

        Returns
        -------
        np.ndarray
            Full image data
        """
        shape = self.get_shape()
        return self.read_chip(0, shape[0], 0, shape[1], bands=bands)

    @abstractmethod
    def get_shape(self) -> Tuple[int, ...]:
        """
        Get the shape of the image as (rows, cols, channels).
        """
        pass

    @abstractmethod
    def get_dtype(self) -> np.dtype:
        """
        Get the data type of the decoded pixels.
        """
        pass

    def close(self) -> None:
        """
        Close the reader and release resources.

        Default implementation does nothing.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False


class ImageWriter(ABC):
    """
    Abstract base class for all raster writers.

    Attributes
    ----------
    filepath : Path
        Path where the image will be written
    metadata : Dict[str, Any]
        Writer options
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        self.filepath = Path(filepath)
        self.metadata = metadata or {}

    @abstractmethod
    def write(self, data: np.ndarray) -> None:
        """
        Write image data to file.

        Parameters
        ----------
        data : np.ndarray
            Image data to write

        Raises
        ------
        ValueError
            If data format is incompatible with the output format
        IOError
            If writing fails
        """
        pass

    def close(self) -> None:
        """
        Close the writer and release resources.

        Default implementation does nothing.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False


def to_pil_image(data: np.ndarray) -> Image.Image:
    """Wrap a raster array in a Pillow image.

    Accepts ``(rows, cols)`` or ``(rows, cols, C)`` with C in 1, 3, 4.
    Non-``uint8`` data is quantized (round half-up, clamp) with a
    warning.

    Raises
    ------
    ValueError
        If the array shape is not a supported raster layout.
    """
    if data.ndim == 3 and data.shape[2] == 1:
        data = data[:, :, 0]
    if not (data.ndim == 2 or (data.ndim == 3 and data.shape[2] in (3, 4))):
        raise ValueError(
            f"Expected grayscale (rows, cols[, 1]), RGB (rows, cols, 3) "
            f"or RGBA (rows, cols, 4), got shape {data.shape}"
        )
    if data.dtype != np.uint8:
        warnings.warn(
            f"{data.dtype} array quantized to uint8 [0, 255] for output.",
            UserWarning,
            stacklevel=3,
        )
        data = quantize(data)
    return Image.fromarray(np.ascontiguousarray(data))
