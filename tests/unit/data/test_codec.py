"""
Unit tests for the pixel <=> vector codec.
"""

import pytest
import numpy as np

from evonet.data.codec import buffer_to_pixels, image_dimensions, pixels_to_vector, vector_to_pixels


class TestPixelsToVector:

    def test_length(self, rgba_2x2):
        assert len(pixels_to_vector(rgba_2x2)) == 16

    def test_row_major_channel_interleaved(self, rgba_2x2):
        vector = pixels_to_vector(rgba_2x2)
        # pixel (x=1, y=0) is the second group of four
        np.testing.assert_array_equal(vector[4:8], np.array([0, 255, 0, 255]) / 256.0)
        # pixel (x=0, y=1) is the third group of four
        np.testing.assert_array_equal(vector[8:12], np.array([0, 0, 255, 128]) / 256.0)

    def test_range(self, rgba_2x2):
        vector = pixels_to_vector(rgba_2x2)
        assert np.all(vector >= 0.0)
        assert np.all(vector <  1.0)
        assert vector.max() == 255 / 256

    @pytest.mark.parametrize("shape", [(2, 2), (2, 2, 3), (16,)])
    def test_bad_shape_raises(self, shape):
        with pytest.raises(ValueError, match="pixel buffer"):
            pixels_to_vector(np.zeros(shape, dtype=np.uint8))


class TestBufferToPixels:

    def test_shape(self):
        pixels = buffer_to_pixels(3, 2, bytes(range(24)))
        assert pixels.shape == (2, 3, 4)
        assert pixels.dtype == np.uint8

    def test_order(self):
        pixels = buffer_to_pixels(3, 2, bytes(range(24)))
        # second row, first pixel starts after 3 pixels of 4 channels
        np.testing.assert_array_equal(pixels[1, 0], [12, 13, 14, 15])

    def test_wrong_length_raises(self):
        with pytest.raises(ValueError, match="Expected 24 bytes"):
            buffer_to_pixels(3, 2, bytes(23))


class TestImageDimensions:

    @pytest.mark.parametrize("count, expected", [
        (1, (1, 1)),
        (4, (2, 2)),
        (6, (2, 3)),
        (7, (7, 1)),
        (12, (3, 4)),
        (4096, (64, 64)),
    ])
    def test_known(self, count, expected):
        assert image_dimensions(count) == expected

    @pytest.mark.parametrize("count", list(range(1, 200)))
    def test_product_matches(self, count):
        width, height = image_dimensions(count)
        assert width * height == count

    @pytest.mark.parametrize("count", [0, -4])
    def test_non_positive_raises(self, count):
        with pytest.raises(ValueError, match="positive"):
            image_dimensions(count)


class TestVectorToPixels:

    def test_round_trip_2x2(self, rgba_2x2):
        pixels = vector_to_pixels(pixels_to_vector(rgba_2x2))
        assert pixels.shape == (2, 2, 4)
        difference = rgba_2x2.astype(int) - pixels.astype(int)
        assert np.all(difference >= 0)
        assert np.all(difference <= 1)

    def test_truncation(self):
        pixels = vector_to_pixels([0.999, 0.5, 0.0, 0.1])
        np.testing.assert_array_equal(pixels[0, 0], [254, 127, 0, 25])

    def test_out_of_range_saturates(self):
        pixels = vector_to_pixels([1.5, -0.5, 0.0, 0.0])
        np.testing.assert_array_equal(pixels[0, 0], [255, 0, 0, 0])

    def test_pixel_position(self):
        # 6 pixels => width 2, height 3; pixel 3 sits at x=1, y=1
        vector = np.zeros(24)
        vector[12:16] = 0.5
        pixels = vector_to_pixels(vector)
        assert pixels.shape == (3, 2, 4)
        np.testing.assert_array_equal(pixels[1, 1], [127, 127, 127, 127])

    @pytest.mark.parametrize("length", [0, 3, 6, 17])
    def test_bad_length_raises(self, length):
        with pytest.raises(ValueError, match="positive multiple of 4"):
            vector_to_pixels(np.zeros(length))
