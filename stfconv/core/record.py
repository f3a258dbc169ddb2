# stfconv/core/record.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .exceptions import InvalidRecord


# File-type enumerations (SAC IFTYPE values)
IFTYPES = ("itime", "irlim", "iamph", "ixy", "ixyz")


def as_samples(data: Any) -> np.ndarray:
    """Coerce `data` to a 1D (npts,) or 2D (npts, ncmp) numeric array."""
    arr = np.asarray(data)
    if arr.ndim not in (1, 2):
        raise InvalidRecord(f"`data` must be 1D or 2D, got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.number) or np.iscomplexobj(arr):
        raise InvalidRecord(f"`data` must be real numeric, got dtype {arr.dtype}")
    return arr


@dataclass(slots=True, eq=False)
class Record:
    """
    One waveform record: a sample buffer plus the header fields needed to
    place it in time.

    The record is mutable: operations replace `data` in place and call
    update() so the derived fields stay consistent:
    - npts: number of samples
    - e: time of the last sample, b + (npts - 1) * delta
    - depmin / depmax / depmen: extrema and mean of the samples
    """

    data: np.ndarray = field(repr=False)
    delta: float = 1.0
    b: float = 0.0
    iftype: str = "itime"
    leven: bool = True
    name: str = ""
    header: dict[str, Any] = field(default_factory=dict, repr=False)

    npts: int = field(default=0, init=False)
    e: float = field(default=0.0, init=False)
    depmin: float | None = field(default=None, init=False)
    depmax: float | None = field(default=None, init=False)
    depmen: float | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.data = as_samples(self.data)

        try:
            self.delta = float(self.delta)
            self.b = float(self.b)
        except (TypeError, ValueError) as exc:
            raise InvalidRecord("`delta` and `b` must be real numbers.") from exc

        if not np.isfinite(self.delta) or self.delta <= 0:
            raise InvalidRecord(f"`delta` must be positive and finite, got {self.delta}")
        if not np.isfinite(self.b):
            raise InvalidRecord("`b` must be finite.")

        if not isinstance(self.iftype, str) or self.iftype.lower() not in IFTYPES:
            raise InvalidRecord(f"`iftype` must be one of {IFTYPES}, got {self.iftype!r}")
        self.iftype = self.iftype.lower()
        self.leven = bool(self.leven)

        if self.header is None:
            self.header = {}
        elif not isinstance(self.header, dict):
            raise InvalidRecord("`header` must be a dict.")

        self.update()

    # ---- derived header fields ----
    def update(self) -> None:
        """Recompute npts, e and the dependent-variable statistics."""
        self.npts = int(self.data.shape[0])
        self.e = self.b + (self.npts - 1) * self.delta if self.npts else self.b

        if self.data.size == 0:
            self.depmin = self.depmax = self.depmen = None
            return
        self.depmin = float(np.min(self.data))
        self.depmax = float(np.max(self.data))
        self.depmen = float(np.mean(self.data))

    @property
    def ncmp(self) -> int:
        return 1 if self.data.ndim == 1 else int(self.data.shape[1])

    @property
    def time(self) -> np.ndarray:
        """Time of each sample (evenly sampled records only)."""
        return self.b + np.arange(self.npts) * self.delta

    # ---- mutation ----
    def set_data(self, data: Any) -> None:
        """Replace the sample buffer (begin time unchanged)."""
        arr = as_samples(data)
        if arr.ndim != self.data.ndim or arr.shape[1:] != self.data.shape[1:]:
            raise InvalidRecord(
                f"new `data` must keep the component layout {self.data.shape[1:]}, got {arr.shape[1:]}"
            )
        self.data = arr
        self.update()

    def attach(self, *, beginning: Any = None, ending: Any = None) -> None:
        """
        Attach samples before the first and/or after the last sample.

        The begin time moves back by len(beginning) * delta; the end time
        follows from the new sample count. Empty or missing tails leave
        that boundary unchanged.
        """
        head = self._as_tail(beginning)
        tail = self._as_tail(ending)
        if head is None and tail is None:
            return

        parts = [self.data]
        n_before = 0
        if head is not None:
            n_before = head.shape[0]
            parts.insert(0, head)
        if tail is not None:
            parts.append(tail)

        self.data = np.concatenate(parts, axis=0)
        self.b = self.b - n_before * self.delta
        self.update()

    def _as_tail(self, tail: Any) -> np.ndarray | None:
        if tail is None:
            return None
        arr = np.asarray(tail)
        if arr.size == 0:
            return None
        if arr.ndim != self.data.ndim or arr.shape[1:] != self.data.shape[1:]:
            raise InvalidRecord(
                f"attached samples must match the component layout {self.data.shape[1:]}, "
                f"got shape {arr.shape}"
            )
        return arr

    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        if copy:
            return self.time, self.data.copy()
        return self.time, self.data

    def copy(self) -> "Record":
        return Record(
            data=self.data.copy(),
            delta=self.delta,
            b=self.b,
            iftype=self.iftype,
            leven=self.leven,
            name=self.name,
            header=self.header.copy(),
        )
