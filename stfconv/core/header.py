# stfconv/core/header.py
from __future__ import annotations

from typing import Iterable

import numpy as np

from .exceptions import InvalidHeader, StructuralValidationError
from .record import IFTYPES, Record
from .recordset import RecordsLike, as_records
from .state import get_state


# Fields that get_header() knows how to read.
HEADER_FIELDS = ("b", "e", "delta", "npts", "ncmp", "depmin", "depmax", "depmen", "iftype", "leven", "name")


def get_header(records: RecordsLike, *fields: str) -> tuple[np.ndarray, ...] | np.ndarray:
    """
    Read header fields across records.

    Returns one array per field (a single array when one field is asked
    for). Numeric fields come back as float/int arrays, `iftype`/`name`
    as object arrays of str and `leven` as a bool array. Unknown field
    names are looked up in each Record's free-form `header` dict.
    """
    recs = as_records(records)
    if not fields:
        raise ValueError("get_header() needs at least one field name")

    out = []
    for name in fields:
        key = name.lower()
        if key in HEADER_FIELDS:
            values = [getattr(rec, key) for rec in recs]
        else:
            values = [rec.header.get(name) for rec in recs]

        if key == "leven":
            out.append(np.array(values, dtype=bool))
        elif key in ("npts", "ncmp"):
            out.append(np.array(values, dtype=int))
        elif key in ("iftype", "name") or key not in HEADER_FIELDS:
            arr = np.empty(len(values), dtype=object)
            arr[:] = values
            out.append(arr)
        else:
            out.append(np.array([np.nan if v is None else v for v in values], dtype=float))

    return out[0] if len(out) == 1 else tuple(out)


def check_records(
    records: RecordsLike,
    required: Iterable[str] = ("dep",),
    *,
    enabled: bool | None = None,
) -> None:
    """
    Structural validation of a record collection.

    required:
      - "dep": every record must carry a non-empty dependent-variable buffer

    enabled defaults to the process-wide `check_structure` setting.
    Raises StructuralValidationError on failure.
    """
    if enabled is None:
        enabled = get_state().check_structure
    if not enabled:
        return

    recs = as_records(records)
    required = set(required)

    unknown = required - {"dep"}
    if unknown:
        raise ValueError(f"unknown required field(s): {sorted(unknown)}")

    bad: list[int] = []
    for i, rec in enumerate(recs):
        data = rec.data
        if not isinstance(data, np.ndarray) or data.ndim not in (1, 2):
            bad.append(i)
        elif "dep" in required and data.size == 0:
            bad.append(i)

    if bad:
        listed = " ".join(str(i) for i in bad)
        raise StructuralValidationError(
            f"Record(s): {listed}\nMissing or malformed dependent data!"
        )


def check_header(records: RecordsLike, *, enabled: bool | None = None) -> None:
    """
    Header consistency check.

    Verifies delta > 0, finite b, a known iftype and that npts/e match the
    sample buffer. Raises InvalidHeader naming every inconsistent record.
    enabled defaults to the process-wide `check_header` setting.
    """
    if enabled is None:
        enabled = get_state().check_header
    if not enabled:
        return

    bad: list[int] = []
    for i, rec in enumerate(as_records(records)):
        if not _header_ok(rec):
            bad.append(i)

    if bad:
        raise InvalidHeader(bad)


def _header_ok(rec: Record) -> bool:
    delta = rec.delta
    if not np.isfinite(delta) or delta <= 0:
        return False
    if not np.isfinite(rec.b):
        return False
    if rec.iftype not in IFTYPES:
        return False
    if rec.npts != rec.data.shape[0]:
        return False
    if rec.npts and not np.isclose(rec.e, rec.b + (rec.npts - 1) * delta):
        return False
    return True
