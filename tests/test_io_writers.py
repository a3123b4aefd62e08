# -*- coding: utf-8 -*-
"""
Writer Tests - PngWriter, JpegWriter, the writer registry and write_image.

Dependencies
------------
pytest
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
2026-10-19

Modified
--------
2026-10-19
"""

import logging

import numpy as np
import pytest
from PIL import Image

from rasterblur.exceptions import ValidationError
from rasterblur.IO import (
    format_for_path,
    get_writer,
    read_image,
    write_image,
    writer_for_path,
)
from rasterblur.IO.base import ImageWriter, to_pil_image
from rasterblur.IO.jpeg import JpegWriter
from rasterblur.IO.png import PngWriter
from rasterblur.vocabulary import OutputFormat


# ---------------------------------------------------------------------------
# to_pil_image
# ---------------------------------------------------------------------------

class TestToPilImage:
    """Test array to Pillow conversion."""

    @pytest.mark.parametrize("shape, mode", [
        ((4, 5), 'L'), ((4, 5, 1), 'L'), ((4, 5, 3), 'RGB'),
        ((4, 5, 4), 'RGBA'),
    ])
    def test_modes(self, shape, mode):
        img = to_pil_image(np.zeros(shape, dtype=np.uint8))
        assert img.mode == mode
        assert img.size == (5, 4)

    def test_two_channels_raises(self):
        with pytest.raises(ValueError, match="Expected grayscale"):
            to_pil_image(np.zeros((4, 4, 2), dtype=np.uint8))

    def test_float_warns_and_quantizes(self):
        with pytest.warns(UserWarning, match="quantized"):
            img = to_pil_image(np.array([[0.5, 300.0]]))
        np.testing.assert_array_equal(np.asarray(img), [[1, 255]])


# ---------------------------------------------------------------------------
# PngWriter
# ---------------------------------------------------------------------------

class TestPngWriter:
    """Test lossless PNG output."""

    @pytest.mark.parametrize("channels", [1, 3, 4])
    def test_round_trip(self, tmp_path, rng, channels):
        data = rng.integers(0, 256, size=(9, 11, channels), dtype=np.uint8)
        path = tmp_path / 'out.png'
        with PngWriter(path) as writer:
            writer.write(data)
        np.testing.assert_array_equal(read_image(path), data)

    def test_compress_level(self, tmp_path, rgba_raster):
        path = tmp_path / 'fast.png'
        PngWriter(path, {'compress_level': 0}).write(rgba_raster)
        np.testing.assert_array_equal(read_image(path), rgba_raster)

    def test_is_image_writer(self, tmp_path):
        assert isinstance(PngWriter(tmp_path / 'a.png'), ImageWriter)


# ---------------------------------------------------------------------------
# JpegWriter
# ---------------------------------------------------------------------------

class TestJpegWriter:
    """Test lossy JPEG output."""

    def test_constant_color(self, tmp_path):
        data = np.empty((16, 16, 3), dtype=np.uint8)
        data[...] = (120, 60, 220)
        path = tmp_path / 'out.jpg'
        JpegWriter(path).write(data)
        with Image.open(path) as img:
            assert img.format == 'JPEG'
        result = read_image(path)
        assert np.all(np.abs(result.astype(int) - data.astype(int)) <= 3)

    def test_grayscale(self, tmp_path):
        path = tmp_path / 'gray.jpg'
        JpegWriter(path).write(np.full((8, 8, 1), 77, dtype=np.uint8))
        result = read_image(path)
        assert result.shape == (8, 8, 1)

    def test_alpha_dropped(self, tmp_path, rgba_raster, caplog):
        path = tmp_path / 'rgba.jpg'
        with caplog.at_level(logging.WARNING, logger='rasterblur.IO.jpeg'):
            JpegWriter(path).write(rgba_raster)
        assert "Dropping alpha channel" in caplog.text
        assert read_image(path).shape == (16, 12, 3)

    def test_quality_option(self, tmp_path, rng):
        data = rng.integers(0, 256, size=(32, 32, 3), dtype=np.uint8)
        hi, lo = tmp_path / 'hi.jpg', tmp_path / 'lo.jpg'
        JpegWriter(hi).write(data)
        JpegWriter(lo, {'quality': 10}).write(data)
        assert lo.stat().st_size < hi.stat().st_size


# ---------------------------------------------------------------------------
# Registry and convenience functions
# ---------------------------------------------------------------------------

class TestWriterRegistry:
    """Test format selection."""

    @pytest.mark.parametrize("name, expected", [
        ('out.png', OutputFormat.PNG),
        ('out.PNG', OutputFormat.PNG),
        ('out.jpg', OutputFormat.JPEG),
        ('out.JPeG', OutputFormat.JPEG),
        ('dir.v2/out.jpeg', OutputFormat.JPEG),
    ])
    def test_format_for_path(self, name, expected):
        assert format_for_path(name) is expected

    @pytest.mark.parametrize("name", ['out.bmp', 'out', 'out.png.txt'])
    def test_unsupported_extension(self, name):
        with pytest.raises(ValidationError, match="Please use .png"):
            format_for_path(name)

    def test_get_writer(self, tmp_path):
        assert isinstance(get_writer('png', tmp_path / 'a.png'), PngWriter)
        assert isinstance(
            get_writer(OutputFormat.JPEG, tmp_path / 'a.jpg'), JpegWriter
        )

    def test_get_writer_unsupported(self, tmp_path):
        with pytest.raises(ValidationError, match="Unsupported output format"):
            get_writer('bmp', tmp_path / 'a.bmp')

    def test_writer_for_path_passes_metadata(self, tmp_path):
        writer = writer_for_path(tmp_path / 'a.jpg', {'quality': 50})
        assert isinstance(writer, JpegWriter)
        assert writer.metadata == {'quality': 50}

    def test_write_image(self, tmp_path, rgba_raster):
        path = tmp_path / 'conv.png'
        write_image(path, rgba_raster)
        np.testing.assert_array_equal(read_image(path), rgba_raster)
