import logging

import pytest
from PIL import Image, ImageDraw

from aapc.constants import Compression
from aapc.image import decode_image, encode_image

logger = logging.getLogger(__name__)


def _make_image(mode, size=(64, 48)):
    image = Image.new(mode, size, color=0)
    draw = ImageDraw.Draw(image)
    fill = 255 if mode == "L" else (255, 254, 0)
    draw.rectangle((8, 8, 40, 30), fill=fill)
    return image


@pytest.mark.parametrize("mode", ["L", "RGB"])
def test_image_round_trip(mode) -> None:
    image = _make_image(mode)
    encoded = encode_image(image)
    assert len(encoded) < len(image.tobytes())

    decoded = decode_image(encoded, image.mode, image.size)
    assert decoded.mode == image.mode
    assert decoded.size == image.size
    assert decoded.tobytes() == image.tobytes()


def test_image_raw_compression() -> None:
    image = _make_image("L")
    encoded = encode_image(image, Compression.RAW)
    assert encoded == image.tobytes()
    assert decode_image(encoded, "L", image.size, Compression.RAW).tobytes() == encoded


def test_image_size_mismatch() -> None:
    image = _make_image("L")
    encoded = encode_image(image)
    with pytest.raises(ValueError):
        decode_image(encoded, "L", (image.width + 1, image.height))
