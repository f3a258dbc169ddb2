# stfconv/convolve/attach.py
from __future__ import annotations

from typing import Any, Sequence

from stfconv.core.exceptions import InvalidArgument
from stfconv.core.header import check_header, check_records
from stfconv.core.recordset import RecordsLike, as_records


def attach(
    records: RecordsLike,
    *,
    ending: Sequence[Any] | None = None,
    beginning: Sequence[Any] | None = None,
) -> RecordsLike:
    """
    Attach per-record sample tails to the end and/or start of each record.

    ending / beginning:
      - None: leave that boundary alone for every record
      - sequence with one entry per record; an empty (or None) entry leaves
        that record's boundary unchanged

    Records are updated in place (b, e, npts and depmin/depmax/depmen)
    and returned.
    """
    recs = as_records(records)
    check_records(recs, ("dep",))
    check_header(recs)

    n = len(recs)
    for label, tails in (("ending", ending), ("beginning", beginning)):
        if tails is not None and len(tails) != n:
            raise InvalidArgument(f"{label} needs one entry per record ({n}), got {len(tails)}")

    for i, rec in enumerate(recs):
        rec.attach(
            beginning=None if beginning is None else beginning[i],
            ending=None if ending is None else ending[i],
        )
    return records
