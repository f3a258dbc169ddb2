# stfconv/convolve/stf.py
"""
Source time functions.

Kernels are centered on t = 0 (acausal) and normalized to unit area, so
convolving them onto a record spreads energy in time without changing
its total.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

import numpy as np

from stfconv.core.broadcast import expand_numbers, expand_strings
from stfconv.core.exceptions import InvalidArgument, UnsupportedKernelType


_LOG = logging.getLogger(__name__)

# Kernel support, in half-widths, on either side of t = 0.
_GAUSSIAN_EXTENT = 1.5
_TRIANGLE_EXTENT = 1.0

# Absorbs float error in extent / delta before rounding up
# (e.g. 0.7 / 0.1 = 6.999...).
_CEIL_TOL = 1e-9


@dataclass(frozen=True, slots=True)
class SourceKernel:
    """Discretized source function: values sampled at `time` (spacing delta)."""

    values: np.ndarray = field(repr=False)
    time: np.ndarray = field(repr=False)
    delta: float
    hwidth: float
    kind: str

    @property
    def n(self) -> int:
        return int(self.values.size)

    @property
    def t_start(self) -> float:
        return float(self.time[0])

    @property
    def area(self) -> float:
        return float(np.sum(self.values) * self.delta)


def gaussian_tf(t: np.ndarray, t0: float, hwidth: float, amp: float = 1.0) -> np.ndarray:
    """Gaussian of unit area (for amp=1): exp(-((t-t0)/hw)^2) / (sqrt(pi) hw)."""
    t = np.asarray(t, dtype=float)
    return amp * np.exp(-(((t - t0) / hwidth) ** 2)) / (np.sqrt(np.pi) * hwidth)


def triangle_tf(t: np.ndarray, t0: float, hwidth: float, amp: float = 1.0) -> np.ndarray:
    """Triangle of unit area (for amp=1), zero outside |t - t0| >= hw."""
    t = np.asarray(t, dtype=float)
    return amp * np.clip(1.0 - np.abs(t - t0) / hwidth, 0.0, None) / hwidth


# name -> (shape function, support in half-widths)
SOURCE_FUNCTIONS: dict[str, tuple[Callable[..., np.ndarray], float]] = {
    "gaussian": (gaussian_tf, _GAUSSIAN_EXTENT),
    "triangle": (triangle_tf, _TRIANGLE_EXTENT),
}


def source_kernel(delta: float, hwidth: float, kind: str = "gaussian") -> SourceKernel:
    """
    Build one unit-area kernel sampled every `delta`.

    The time axis is k * delta for |k| <= ceil(extent * hwidth / delta),
    so it always starts at a whole (negative) number of samples. A zero
    half-width gives a single-sample impulse at t = 0.
    """
    key = kind.lower()
    if key not in SOURCE_FUNCTIONS:
        raise UnsupportedKernelType(detail=f"got {kind!r}; valid: {', '.join(SOURCE_FUNCTIONS)}")
    if not np.isfinite(delta) or delta <= 0:
        raise InvalidArgument(f"delta must be positive and finite, got {delta}")
    if not np.isfinite(hwidth) or hwidth < 0:
        raise InvalidArgument(f"hwidth must be non-negative and finite, got {hwidth}")

    if hwidth == 0:
        return SourceKernel(
            values=np.array([1.0 / delta]),
            time=np.array([0.0]),
            delta=float(delta),
            hwidth=0.0,
            kind=key,
        )

    func, extent = SOURCE_FUNCTIONS[key]
    half = int(np.ceil(extent * hwidth / delta - _CEIL_TOL))
    time = np.arange(-half, half + 1) * delta
    values = func(time, 0.0, hwidth)

    area = np.sum(values) * delta
    values = values / area

    return SourceKernel(values=values, time=time, delta=float(delta), hwidth=float(hwidth), kind=key)


def make_source_timefunction(
    delta: Any,
    hwidth: Any,
    kind: Any = "gaussian",
) -> list[SourceKernel]:
    """
    Build one kernel per record.

    delta:
      - one sample interval per record (its length sets the batch size)
    hwidth, kind:
      - a single value for every record, or exactly one per record

    Raises InvalidArgument on bad cardinality/values and
    UnsupportedKernelType naming every record with an unknown kind.
    """
    deltas = np.atleast_1d(np.asarray(delta, dtype=float)).ravel()
    n = deltas.size

    hwidths = expand_numbers(hwidth, n, "hwidth")
    kinds = expand_strings(kind, n, "type")

    unknown = [i for i, k in enumerate(kinds) if k.lower() not in SOURCE_FUNCTIONS]
    if unknown:
        names = sorted({kinds[i] for i in unknown})
        raise UnsupportedKernelType(
            unknown, f"got {', '.join(repr(s) for s in names)}; valid: {', '.join(SOURCE_FUNCTIONS)}"
        )

    bad = [i for i, h in enumerate(hwidths) if not np.isfinite(h) or h < 0]
    if bad:
        raise InvalidArgument(f"hwidth must be non-negative and finite (record(s): {bad})")

    kernels = [source_kernel(d, h, k) for d, h, k in zip(deltas, hwidths, kinds)]
    for i, kern in enumerate(kernels):
        _LOG.debug("record %d: %s kernel, hwidth=%g, %d samples", i, kern.kind, kern.hwidth, kern.n)
    return kernels
