import pytest
from PIL import Image

from ghost_canvas.models import CanvasSnapshot


def test_snapshot_from_image():
    img = Image.new("RGBA", (3, 2), (10, 20, 30, 255))

    snapshot = CanvasSnapshot.from_image(img)

    assert snapshot.width == 3
    assert snapshot.height == 2
    assert len(snapshot.pixels) == 3 * 2 * 4
    assert snapshot.get_pixel(2, 1) == (10, 20, 30, 255)


def test_snapshot_does_not_follow_image_changes():
    img = Image.new("RGBA", (2, 2), (0, 0, 0, 255))
    snapshot = CanvasSnapshot.from_image(img)

    img.putpixel((0, 0), (255, 0, 0, 255))

    assert snapshot.get_pixel(0, 0) == (0, 0, 0, 255)


def test_snapshot_get_pixel_out_of_range():
    snapshot = CanvasSnapshot(width=1, height=1, pixels=bytes(4))

    with pytest.raises(IndexError):
        snapshot.get_pixel(1, 0)
    with pytest.raises(IndexError):
        snapshot.get_pixel(0, -1)


def test_snapshot_to_image():
    img = Image.new("RGBA", (4, 4), (1, 2, 3, 255))
    img.putpixel((1, 2), (200, 100, 50, 255))

    restored = CanvasSnapshot.from_image(img).to_image()

    assert restored.size == (4, 4)
    assert restored.getpixel((1, 2)) == (200, 100, 50, 255)
