"""Pytest configuration and fixtures."""

import pytest
from PIL import Image

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


@pytest.fixture
def black_square():
    """8x8 fully opaque black image."""
    return Image.new("RGBA", (8, 8), BLACK)


@pytest.fixture
def striped_column():
    """1x24 image with black even rows and white odd rows."""
    image = Image.new("RGBA", (1, 24), WHITE)
    for y in range(0, 24, 2):
        image.putpixel((0, y), BLACK)
    return image
