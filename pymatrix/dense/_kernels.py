"""
Sequential element-wise kernels for the dense Matrix.

Each kernel takes plain 2-D arrays that the caller has already validated
(same shape, same dtype) and returns a freshly allocated array. No kernel
mutates its inputs.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.dtypes import DEFAULT_ATOL, DEFAULT_RTOL, is_integral

logger = logging.getLogger(__name__)


def seq_add(a: NDArray[Any], b: NDArray[Any], stacklevel: int = 2) -> NDArray[Any]:
    """
    Element-wise sum, single pass, single thread.

    Integer overflow wraps (numpy semantics) and emits a RuntimeWarning
    attributed stacklevel frames up from this function.
    """
    out = np.empty_like(a)
    np.add(a, b, out=out)

    if is_integral(a.dtype) and a.size:
        # wrapped iff the sum moved opposite to the sign of b
        wrapped = ((b > 0) & (out < a)) | ((b < 0) & (out > a))
        if np.any(wrapped):
            n_wrapped = int(np.count_nonzero(wrapped))
            warnings.warn(
                f"integer overflow in seq_add: {n_wrapped} element(s) wrapped around {a.dtype}",
                RuntimeWarning,
                stacklevel=stacklevel,
            )

    logger.debug("seq_add %dx%d %s", a.shape[0], a.shape[1], a.dtype)
    return out


def transpose(a: NDArray[Any]) -> NDArray[Any]:
    """Return a C-contiguous copy of a with rows and columns swapped."""
    logger.debug("transpose %dx%d -> %dx%d", a.shape[0], a.shape[1], a.shape[1], a.shape[0])
    return np.ascontiguousarray(a.T)


def all_equal(a: NDArray[Any], b: NDArray[Any]) -> bool:
    """True iff every element of a equals the element of b at the same position."""
    return bool(np.array_equal(a, b))


def all_close(
    a: NDArray[Any],
    b: NDArray[Any],
    rtol: float = DEFAULT_RTOL,
    atol: float = DEFAULT_ATOL,
) -> bool:
    """
    Tolerance comparison: |a - b| <= atol + rtol * |b| everywhere.

    Computed in float64 so unsigned subtraction cannot wrap.
    NaN never compares close.
    """
    a64 = a.astype(np.float64)
    b64 = b.astype(np.float64)
    return bool(np.all(np.abs(a64 - b64) <= atol + rtol * np.abs(b64)))
