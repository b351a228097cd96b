import numpy as np


class DimensionMismatch(ValueError):
    """Raised when operand shapes don't satisfy an operation's precondition."""

    def __init__(self, operation, *shapes):
        self.operation = operation
        self.shapes = shapes
        shown = " and ".join(str(s) for s in shapes)
        super().__init__(f"{operation}: incompatible shapes {shown}")


def _as_matrix(m, operation):
    m = np.asarray(m, dtype=float)
    if m.ndim != 2:
        raise DimensionMismatch(operation, m.shape)
    return m


def _same_shape(m, n, operation):
    m = _as_matrix(m, operation)
    n = _as_matrix(n, operation)
    if m.shape != n.shape:
        raise DimensionMismatch(operation, m.shape, n.shape)
    return m, n


def column(values) -> np.ndarray:
    """Turn a flat sequence of numbers into a (len x 1) vector."""
    values = np.asarray(values, dtype=float)
    if values.ndim == 2 and values.shape[1] == 1:
        return values.copy()
    if values.ndim != 1:
        raise DimensionMismatch("column", values.shape)
    return values.reshape(-1, 1)


def dot(m, n) -> np.ndarray:
    """Matrix product. Inner dimensions have to agree."""
    m = _as_matrix(m, "dot")
    n = _as_matrix(n, "dot")
    if m.shape[1] != n.shape[0]:
        raise DimensionMismatch("dot", m.shape, n.shape)
    return np.dot(m, n)


def mult(m, n) -> np.ndarray:
    """Element-wise (Hadamard) product."""
    m, n = _same_shape(m, n, "mult")
    return np.multiply(m, n)


def add(m, n) -> np.ndarray:
    m, n = _same_shape(m, n, "add")
    return np.add(m, n)


def sub(m, n) -> np.ndarray:
    m, n = _same_shape(m, n, "sub")
    return np.subtract(m, n)


def scale(factor: float, m) -> np.ndarray:
    m = _as_matrix(m, "scale")
    return factor * m


def add_scalar(m, value: float) -> np.ndarray:
    """Add the same constant to every element."""
    m = _as_matrix(m, "add_scalar")
    return add(m, np.full(m.shape, value, dtype=float))


def apply(fn, m) -> np.ndarray:
    """
    Apply fn to every element of m.

    fn receives the element's value only and must return a number. Works with
    plain python functions (math.exp etc.) as well as numpy ufuncs.
    """
    m = _as_matrix(m, "apply")
    return np.vectorize(fn, otypes=[float])(m)


def transpose(m) -> np.ndarray:
    m = _as_matrix(m, "transpose")
    return m.T.copy()


def ones_like(m) -> np.ndarray:
    m = _as_matrix(m, "ones_like")
    return np.ones(m.shape, dtype=float)
