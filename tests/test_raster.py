"""Tests for RasterImage and width padding."""

import pytest
from PIL import Image

from rastercmd.raster import TRANSPARENT, RasterImage, pad_to_multiple_of_8

COLOR = (10, 20, 30, 255)


class TestRasterImage:
    """Tests for RasterImage."""

    def test_dimensions(self):
        raster = RasterImage(Image.new("RGBA", (5, 3), COLOR))
        assert raster.width == 5
        assert raster.height == 3
        assert raster.size == (5, 3)

    def test_pixel_access(self):
        image = Image.new("RGBA", (2, 2), COLOR)
        image.putpixel((1, 1), (1, 2, 3, 4))
        raster = RasterImage(image)
        assert raster.pixel(0, 0) == COLOR
        assert raster.pixel(1, 1) == (1, 2, 3, 4)

    def test_pixel_out_of_range(self):
        raster = RasterImage(Image.new("RGBA", (2, 2), COLOR))
        with pytest.raises(IndexError):
            raster.pixel(2, 0)

    def test_converts_to_rgba(self):
        """Non-RGBA images are converted on the way in."""
        raster = RasterImage(Image.new("1", (1, 1), 0))
        assert raster.pixel(0, 0) == (0, 0, 0, 255)

    def test_independent_of_source_image(self):
        """Changing the source afterwards does not change the raster."""
        image = Image.new("RGBA", (1, 1), (0, 0, 0, 255))
        raster = RasterImage(image)
        image.putpixel((0, 0), (255, 255, 255, 255))
        assert raster.pixel(0, 0) == (0, 0, 0, 255)

    def test_open(self, tmp_path):
        path = tmp_path / "image.png"
        Image.new("RGBA", (3, 4), COLOR).save(path)
        raster = RasterImage.open(path)
        assert raster.size == (3, 4)
        assert raster.pixel(2, 3) == COLOR


class TestPadToMultipleOf8:
    """Tests for pad_to_multiple_of_8."""

    @pytest.mark.parametrize("width, expected", [(1, 8), (7, 8), (9, 16), (10, 16), (15, 16)])
    def test_pads_to_next_multiple(self, width, expected):
        raster = RasterImage(Image.new("RGBA", (width, 3), COLOR))
        padded = pad_to_multiple_of_8(raster)
        assert padded.size == (expected, 3)

    def test_keeps_original_pixels_and_adds_transparent(self):
        image = Image.new("RGBA", (10, 2), COLOR)
        image.putpixel((9, 1), (1, 2, 3, 128))
        padded = pad_to_multiple_of_8(RasterImage(image))

        for y in range(2):
            for x in range(16):
                if x >= 10:
                    assert padded.pixel(x, y) == TRANSPARENT
                elif (x, y) == (9, 1):
                    assert padded.pixel(x, y) == (1, 2, 3, 128)
                else:
                    assert padded.pixel(x, y) == COLOR

    @pytest.mark.parametrize("width", [8, 16, 24])
    def test_aligned_width_unchanged(self, width):
        """Padding an aligned raster is a no-op."""
        raster = RasterImage(Image.new("RGBA", (width, 2), COLOR))
        padded = pad_to_multiple_of_8(raster)
        assert padded.size == raster.size
        assert padded.pixels() == raster.pixels()

    def test_idempotent(self):
        raster = RasterImage(Image.new("RGBA", (5, 2), COLOR))
        once = pad_to_multiple_of_8(raster)
        twice = pad_to_multiple_of_8(once)
        assert twice.size == once.size
        assert twice.pixels() == once.pixels()
