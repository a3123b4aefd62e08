# -*- coding: utf-8 -*-
"""
JPEG Writer - Write uint8 grayscale and RGB arrays to JPEG format.

JPEG has no alpha channel: RGBA input is written as RGB and the alpha
plane is discarded, with a log warning. Quality defaults to 100.

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

# Third-party
import numpy as np

# rasterblur internal
from rasterblur.exceptions import ImageIOError
from rasterblur.IO.base import ImageWriter, to_pil_image

logger = logging.getLogger(__name__)

DEFAULT_QUALITY = 100


class JpegWriter(ImageWriter):
    """Write grayscale or RGB arrays to JPEG files.

    Parameters
    ----------
    filepath : str or Path
        Output JPEG file path.
    metadata : dict, optional
        Writer options; ``quality`` (1-100) overrides the default 100.

    Examples
    --------
    >>> from rasterblur.IO.jpeg import JpegWriter
    >>> with JpegWriter('output.jpg') as writer:
    ...     writer.write(raster)
    """

    def write(self, data: np.ndarray) -> None:
        """Write image data to a JPEG file.

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
        if img.mode == 'RGBA':
            logger.warning("Dropping alpha channel for JPEG output %s",
                           self.filepath)
            img = img.convert('RGB')
        quality = self.metadata.get('quality', DEFAULT_QUALITY)
        try:
            img.save(str(self.filepath), format='JPEG', quality=quality)
        except (OSError, ValueError) as e:
            raise ImageIOError(
                f"could not write JPEG: {self.filepath}"
            ) from e
