# stfconv/convolve/engine.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from stfconv.core.exceptions import InvalidArgument
from stfconv.core.record import Record


@dataclass(frozen=True, slots=True)
class ConvolutionResult:
    """
    Output of convolving one record, split along the record's time span:
    - data: samples at the record's original sample times
    - beginning: samples preceding the original first sample
    - ending: samples following the original last sample

    Concatenating beginning + data + ending gives the full linear
    convolution (padded with zeros where the kernel shift leaves a gap).
    """

    data: np.ndarray = field(repr=False)
    beginning: np.ndarray = field(repr=False)
    ending: np.ndarray = field(repr=False)
    delay: int = 0

    @property
    def full(self) -> np.ndarray:
        return np.concatenate([self.beginning, self.data, self.ending], axis=0)


def output_dtype(data: np.ndarray) -> np.dtype:
    """Floating buffers keep their precision; anything else becomes float64."""
    if np.issubdtype(data.dtype, np.floating):
        return data.dtype
    return np.dtype(np.float64)


def convolve_samples(data: np.ndarray, kernel: np.ndarray, delay: int) -> ConvolutionResult:
    """
    Linear convolution of `data` (npts,) or (npts, ncmp) with `kernel`.

    `delay` is the sample index (relative to t = 0) of the kernel's first
    value. Full-convolution sample j therefore falls at record sample
    j + delay; samples landing before 0 or after npts - 1 go to the
    beginning / ending tails.
    """
    dtype = output_dtype(data)
    kern = np.asarray(kernel, dtype=dtype).ravel()
    if kern.size == 0:
        raise InvalidArgument("kernel must not be empty")

    columns = (data[:, np.newaxis] if data.ndim == 1 else data).astype(dtype, copy=False)
    npts, ncmp = columns.shape
    nfull = npts + kern.size - 1

    # empty buffer: empty result, no tails
    start = min(delay, 0) if npts else 0
    stop = max(npts, delay + nfull) if npts else 0
    out = np.zeros((stop - start, ncmp), dtype=dtype)
    if npts:
        for c in range(ncmp):
            out[delay - start: delay - start + nfull, c] = np.convolve(columns[:, c], kern)

    main = out[-start: -start + npts]
    beginning = out[: -start]
    ending = out[-start + npts:]

    if data.ndim == 1:
        main, beginning, ending = main[:, 0], beginning[:, 0], ending[:, 0]

    return ConvolutionResult(
        data=main.copy(),
        beginning=beginning.copy(),
        ending=ending.copy(),
        delay=int(delay),
    )


def convolve_records(
    records: Sequence[Record],
    kernels: Sequence[np.ndarray],
    delays: Sequence[int],
) -> list[ConvolutionResult]:
    """
    Convolve each record with its kernel.

    Pure: records are not modified; use apply_results() to commit.
    """
    if not (len(records) == len(kernels) == len(delays)):
        raise InvalidArgument(
            f"need one kernel and delay per record, got {len(records)} records, "
            f"{len(kernels)} kernels, {len(delays)} delays"
        )
    return [
        convolve_samples(rec.data, kern, int(d))
        for rec, kern, d in zip(records, kernels, delays)
    ]


def apply_results(records: Sequence[Record], results: Sequence[ConvolutionResult]) -> None:
    """Replace each record's samples with its convolved samples (bounds unchanged)."""
    for rec, res in zip(records, results):
        rec.set_data(res.data)
