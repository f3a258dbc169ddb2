# stfconv/core/broadcast.py
"""
Expansion of per-record arguments.

Arguments that may be given once for the whole batch or once per record
are expanded here into a fixed-length sequence before any processing runs.
"""
from __future__ import annotations

from numbers import Real
from typing import Any, Sequence

import numpy as np

from .exceptions import InvalidArgument


def expand_numbers(value: Any, n: int, name: str = "value") -> np.ndarray:
    """
    Expand a real scalar, or an array of 1 or `n` reals, to a float array of length n.
    """
    if isinstance(value, (bool, np.bool_)):
        raise InvalidArgument(f"{name} must be real-valued, got bool")
    if isinstance(value, Real):
        return np.full(n, float(value))

    try:
        arr = np.asarray(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"{name} must be a real scalar or array") from e

    if arr.dtype == object or not np.issubdtype(arr.dtype, np.number) or np.iscomplexobj(arr):
        raise InvalidArgument(f"{name} must be real-valued, got dtype {arr.dtype}")

    arr = arr.astype(float).ravel()
    if arr.size == 1:
        return np.full(n, arr[0])
    if arr.size != n:
        raise InvalidArgument(
            f"{name} must be a scalar or have one value per record ({n}), got {arr.size}"
        )
    return arr


def expand_strings(value: Any, n: int, name: str = "value") -> list[str]:
    """
    Expand a string, or a sequence of 1 or `n` strings, to a list of length n.
    """
    if isinstance(value, str):
        return [value] * n
    if not isinstance(value, Sequence) and not isinstance(value, np.ndarray):
        raise InvalidArgument(f"{name} must be a string or a sequence of strings")

    values = list(np.asarray(value, dtype=object).ravel()) if isinstance(value, np.ndarray) else list(value)
    if not all(isinstance(v, str) for v in values):
        raise InvalidArgument(f"{name} must contain only strings")
    if len(values) == 1:
        return values * n
    if len(values) != n:
        raise InvalidArgument(
            f"{name} must be a string or have one entry per record ({n}), got {len(values)}"
        )
    return values
