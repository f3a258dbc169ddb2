# stfconv/convolve/validate.py
from __future__ import annotations

import numpy as np

from stfconv.core.exceptions import IncompatibleRecordType, UnevenSamplingError
from stfconv.core.header import get_header
from stfconv.core.recordset import RecordsLike


# Record types that carry an evenly spaced dependent variable along time.
CONVOLVABLE_IFTYPES = ("itime", "ixy")


def validate_convolvable(records: RecordsLike) -> None:
    """
    Check every record can take a time-domain convolution.

    Collects all offending records before failing: the type check is
    reported first, then the sampling check.
    """
    iftype, leven = get_header(records, "iftype", "leven")

    bad_type = np.flatnonzero([t.lower() not in CONVOLVABLE_IFTYPES for t in iftype])
    if bad_type.size:
        raise IncompatibleRecordType(bad_type.tolist())

    uneven = np.flatnonzero(~leven)
    if uneven.size:
        raise UnevenSamplingError(uneven.tolist())
