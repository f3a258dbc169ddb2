# stfconv/core/exceptions.py
from __future__ import annotations

from typing import Iterable


class CoreError(Exception):
    """Base error for all stfconv exceptions."""


# ---- Construction / structure errors ----
class StructuralValidationError(CoreError):
    """Raised when a record collection is not structurally usable."""


class InvalidRecord(StructuralValidationError):
    """Raised when a Record is constructed with invalid inputs."""


class InvalidArgument(CoreError, ValueError):
    """Raised on bad cardinality or type of a per-record argument."""


# ---- Batch errors (carry every offending record index) ----
class BatchError(CoreError):
    """Error naming every offending record of a batch (none outside a batch)."""

    reason: str = "Invalid record(s)"

    def __init__(self, indices: Iterable[int] = (), detail: str | None = None) -> None:
        self.indices = tuple(sorted(int(i) for i in indices))
        self.detail = detail
        msg = self.reason
        if self.indices:
            listed = " ".join(str(i) for i in self.indices)
            msg = f"Record(s): {listed}\n{msg}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class InvalidHeader(BatchError):
    """Raised when header fields are inconsistent (delta, b, npts, ...)."""

    reason = "Invalid header field(s) in record(s)!"


class IncompatibleRecordType(BatchError):
    """Raised when a record is neither a time series nor an XY record."""

    reason = "Datatype of record(s) must be Timeseries or XY!"


class UnevenSamplingError(BatchError):
    """Raised when an operation requires evenly sampled records."""

    reason = "Invalid operation on unevenly sampled record(s)!"


class UnsupportedKernelType(BatchError, ValueError):
    """Raised when a source-function type name is unknown."""

    reason = "Unknown source function type!"


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class RecordNotFound(CoreError, KeyError):
    """Raised when a requested record index or name is not present."""
