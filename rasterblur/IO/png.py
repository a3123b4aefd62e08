# -*- coding: utf-8 -*-
"""
PNG Writer - Write uint8 grayscale, RGB and RGBA arrays to PNG format.

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
2026-02-11

Modified
--------
2026-10-19
"""

# Third-party
import numpy as np

# rasterblur internal
from rasterblur.exceptions import ImageIOError
from rasterblur.IO.base import ImageWriter, to_pil_image


class PngWriter(ImageWriter):
    """Write grayscale, RGB or RGBA arrays to PNG files (lossless).

    Parameters
    ----------
    filepath : str or Path
        Output PNG file path.
    metadata : dict, optional
        Writer options; ``compress_level`` (0-9) is passed to Pillow.

    Examples
    --------
    >>> from rasterblur.IO.png import PngWriter
    >>> with PngWriter('output.png') as writer:
    ...     writer.write(raster)
    """

    def write(self, data: np.ndarray) -> None:
        """Write image data to a PNG file.

        Parameters
        ----------
        data : np.ndarray
            ``(rows, cols)`` or ``(rows, cols, C)`` with C in 1, 3, 4.
            Non-uint8 data is quantized with a warning.

        Raises
        ------
        ValueError
            If the array shape is unsupported.
        ImageIOError
            If encoding or writing fails.
        """
        img = to_pil_image(data)
        options = {}
        if 'compress_level' in self.metadata:
            options['compress_level'] = self.metadata['compress_level']
        try:
            img.save(str(self.filepath), format='PNG', **options)
        except (OSError, ValueError) as e:
            raise ImageIOError(
                f"could not write PNG: {self.filepath}"
            ) from e
