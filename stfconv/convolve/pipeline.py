# stfconv/convolve/pipeline.py
from __future__ import annotations

import logging
from typing import Any

from stfconv.core.header import check_header, check_records, get_header
from stfconv.core.recordset import RecordsLike, as_records
from stfconv.core.state import checks_disabled, is_verbose

from .attach import attach
from .delay import kernel_delays
from .engine import apply_results, convolve_records
from .stf import SourceKernel, make_source_timefunction
from .validate import validate_convolvable


_LOG = logging.getLogger(__name__)


def convolve_source_timefunction(
    records: RecordsLike,
    hwidth: Any,
    stf_type: Any = "gaussian",
    *,
    return_kernels: bool = False,
) -> RecordsLike | tuple[RecordsLike, list[SourceKernel]]:
    """
    Convolve a unit-area source time function onto each record.

    hwidth:
      - half width of the source function (seconds); one value for all
        records or one per record
    stf_type:
      - "gaussian" (support about -1.5*hwidth .. 1.5*hwidth) or
        "triangle" (about -hwidth .. hwidth); one name or one per record
    return_kernels:
      - also return the kernel used for each record

    The kernel is centered on each sample, so the operation is acausal:
    energy spreads before the first and after the last sample. Those
    samples are attached to the records, moving b back and e forward.
    Header fields updated: b, e, npts, depmin, depmax, depmen.

    Records are modified in place, and only once every record has passed
    validation and been convolved; any error leaves all of them untouched.
    """
    recs = as_records(records)
    check_records(recs, ("dep",))
    check_header(recs)

    # nested collaborators skip re-checking
    with checks_disabled():
        validate_convolvable(recs)

        delta = get_header(recs, "delta")
        kernels = make_source_timefunction(delta, hwidth, stf_type)
        delays = kernel_delays(kernels)
        for i, d in enumerate(delays):
            _LOG.debug("record %d: delay %d samples", i, d)

        results = convolve_records(recs, [k.values for k in kernels], delays)

        # Nothing has been modified up to here.
        apply_results(recs, results)

        if is_verbose():
            _LOG.info("Attaching convolution final conditions onto %d record(s)", len(recs))
        attach(
            recs,
            ending=[res.ending for res in results],
            beginning=[res.beginning for res in results],
        )

    if return_kernels:
        return records, kernels
    return records
