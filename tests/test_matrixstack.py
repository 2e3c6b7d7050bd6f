import numpy as np
import pytest

from gridvis.matrixstack import MatrixStack


def test_starts_with_identity():
    stack = MatrixStack()
    assert len(stack) == 1
    assert np.array_equal(stack.top(), np.identity(4))


def test_push_copies_top():
    stack = MatrixStack()
    stack.translate(1, 2, 3)
    stack.push()
    assert len(stack) == 2
    stack.scale(2)
    stack.pop()
    assert len(stack) == 1
    assert np.array_equal(stack.top()[:3, 3], [1, 2, 3])
    assert np.array_equal(np.diag(stack.top()), [1, 1, 1, 1])


def test_pop_empty_is_safe_and_top_recreates_identity():
    stack = MatrixStack()
    stack.pop()
    stack.pop()
    assert len(stack) == 0
    assert np.array_equal(stack.top(), np.identity(4))
    assert len(stack) == 1


def test_translate_moves_origin():
    stack = MatrixStack()
    stack.translate(1, 2)
    point = stack.top() @ np.array([0, 0, 0, 1.0])
    assert np.allclose(point, [1, 2, 0, 1])


def test_transforms_multiply_on_right():
    stack = MatrixStack()
    stack.translate(1, 0, 0)
    stack.scale(2, 2, 2)
    point = stack.top() @ np.array([1.0, 0, 0, 1])
    assert np.allclose(point, [3, 0, 0, 1])


def test_rotate_z_quarter_turn():
    stack = MatrixStack()
    stack.rotate_z(90)
    point = stack.top() @ np.array([1.0, 0, 0, 1])
    assert np.allclose(point, [0, 1, 0, 1])


@pytest.mark.parametrize("method", ["rotate_x", "rotate_y", "rotate_z"])
def test_rotation_inverse_gives_identity(method):
    stack = MatrixStack()
    getattr(stack, method)(37)
    assert np.isclose(np.linalg.det(stack.top()), 1.0)
    getattr(stack, method)(-37)
    assert np.allclose(stack.top(), np.identity(4))


def test_rotate_normalises_axis():
    a = MatrixStack()
    b = MatrixStack()
    a.rotate(30, (0, 0, 5))
    b.rotate_z(30)
    assert np.allclose(a.top(), b.top())


def test_zero_axis_rejected():
    with pytest.raises(ValueError):
        MatrixStack().rotate(10, (0, 0, 0))