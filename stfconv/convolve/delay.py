# stfconv/convolve/delay.py
from __future__ import annotations

from typing import Sequence

import numpy as np

from .stf import SourceKernel


def round_half_away(x: np.ndarray) -> np.ndarray:
    """Round to nearest integer, ties away from zero (np.round ties to even)."""
    x = np.asarray(x, dtype=float)
    return np.sign(x) * np.floor(np.abs(x) + 0.5)


def resolve_delays(t_start: Sequence[float], delta: Sequence[float]) -> np.ndarray:
    """
    Sample shift of each kernel's first sample: round(t_start / delta).

    Negative for a centered kernel (its first sample precedes t = 0).
    """
    t0 = np.asarray(t_start, dtype=float).ravel()
    dt = np.asarray(delta, dtype=float).ravel()
    if t0.shape != dt.shape:
        raise ValueError(f"t_start and delta must have the same length, got {t0.size} vs {dt.size}")
    return round_half_away(t0 / dt).astype(int)


def kernel_delays(kernels: Sequence[SourceKernel]) -> np.ndarray:
    return resolve_delays([k.t_start for k in kernels], [k.delta for k in kernels])
