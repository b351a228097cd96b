import math

import numpy as np
import pytest

from matrix_ops import (
    DimensionMismatch,
    add,
    add_scalar,
    apply,
    column,
    dot,
    mult,
    ones_like,
    scale,
    sub,
    transpose,
)

A = np.array([[1.0, 2.0, 3.0],
              [4.0, 5.0, 6.0]])
B = np.array([[1.0, 0.0],
              [0.0, 1.0],
              [2.0, -1.0]])


def test_dot_product_shape_and_values():
    result = dot(A, B)
    assert result.shape == (2, 2)
    np.testing.assert_allclose(result, [[7.0, -1.0], [16.0, -1.0]])


def test_dot_inner_dimension_mismatch():
    with pytest.raises(DimensionMismatch) as excinfo:
        dot(np.ones((2, 3)), np.ones((4, 2)))
    assert excinfo.value.operation == "dot"
    assert excinfo.value.shapes == ((2, 3), (4, 2))


def test_dot_rejects_flat_arrays():
    with pytest.raises(DimensionMismatch):
        dot(np.ones(3), np.ones((3, 1)))


@pytest.mark.parametrize("op", [mult, add, sub])
def test_elementwise_ops_need_equal_shapes(op):
    with pytest.raises(DimensionMismatch):
        op(np.ones((2, 3)), np.ones((3, 2)))


def test_elementwise_values():
    other = np.full((2, 3), 2.0)
    np.testing.assert_allclose(mult(A, other), A * 2)
    np.testing.assert_allclose(add(A, other), A + 2)
    np.testing.assert_allclose(sub(A, other), A - 2)


def test_scale_and_add_scalar():
    np.testing.assert_allclose(scale(0.5, A), A / 2)
    np.testing.assert_allclose(add_scalar(A, -1.0), A - 1)


def test_apply_with_plain_function():
    result = apply(math.exp, np.zeros((2, 2)))
    np.testing.assert_allclose(result, np.ones((2, 2)))


def test_transpose_and_ones_like():
    assert transpose(A).shape == (3, 2)
    np.testing.assert_allclose(transpose(A)[2], [3.0, 6.0])
    np.testing.assert_allclose(ones_like(A), np.ones((2, 3)))


def test_column():
    assert column([1, 2, 3]).shape == (3, 1)
    assert column(np.ones((4, 1))).shape == (4, 1)
    with pytest.raises(DimensionMismatch):
        column(np.ones((2, 2)))


def test_operands_are_not_mutated():
    a = A.copy()
    b = B.copy()
    dot(a, b)
    mult(a, a)
    add(a, a)
    sub(a, a)
    scale(3.0, a)
    apply(lambda x: x * 10, a)
    t = transpose(a)
    t[0, 0] = 99.0
    np.testing.assert_array_equal(a, A)
    np.testing.assert_array_equal(b, B)


def test_results_are_new_arrays():
    assert add(A, np.zeros_like(A)) is not A
    assert scale(1.0, A) is not A


def test_apply_keeps_shape_and_float_dtype():
    result = apply(lambda x: 1 if x > 0 else 0, np.array([[-1.0, 2.0, 0.5]]))
    assert result.shape == (1, 3)
    assert result.dtype == np.float64
    np.testing.assert_array_equal(result, [[0.0, 1.0, 1.0]])
