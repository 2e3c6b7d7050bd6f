import numpy as np
import pytest

from gridvis.image import Color3, ImageBuffer


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color3(256, 0, 0)
    with pytest.raises(ValueError):
        Color3(0, -1, 0)


def test_color_iterates_components():
    assert tuple(Color3(1, 2, 3)) == (1, 2, 3)


def test_new_buffer_is_black():
    img = ImageBuffer(3, 2)
    assert img.pixels.shape == (2, 3, 3)
    assert all(c == Color3(0, 0, 0) for c in img)
    assert len(img) == 6


def test_flat_and_tuple_indexing_agree():
    img = ImageBuffer(4, 3)
    img[1 * 4 + 2] = Color3(10, 20, 30)
    assert img[1, 2] == Color3(10, 20, 30)
    img[2, 3] = (5, 6, 7)
    assert img[2 * 4 + 3] == Color3(5, 6, 7)


def test_index_errors():
    img = ImageBuffer(2, 2)
    with pytest.raises(IndexError):
        img[4]
    with pytest.raises(IndexError):
        img[-1]
    with pytest.raises(IndexError):
        img[2, 0]
    with pytest.raises(IndexError):
        img[0, 2] = Color3()


def test_setitem_validates_colour():
    img = ImageBuffer(1, 1)
    with pytest.raises(ValueError):
        img[0] = (300, 0, 0)
    assert img[0] == Color3(0, 0, 0)


def test_fill_and_to_bytes():
    img = ImageBuffer(2, 1)
    img.fill(Color3(255, 0, 0))
    assert img.to_bytes() == bytes([255, 0, 0, 255, 0, 0])


def test_to_bytes_row_major_order():
    img = ImageBuffer(2, 2)
    img[0, 1] = Color3(9, 9, 9)
    data = img.to_bytes()
    assert len(data) == 2 * 2 * 3
    assert data[3:6] == bytes([9, 9, 9])
    assert data[:3] == bytes([0, 0, 0])


def test_pixels_array_is_shared():
    img = ImageBuffer(2, 2)
    img.pixels[1, 0] = (1, 2, 3)
    assert img[2] == Color3(1, 2, 3)
    assert np.array_equal(img.pixels[1, 0], [1, 2, 3])


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        ImageBuffer(-1, 2)


def test_empty_buffer():
    img = ImageBuffer(0, 0)
    assert len(img) == 0
    assert img.to_bytes() == b""