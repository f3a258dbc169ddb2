# stfconv/__init__.py
"""
stfconv: convolve source time functions onto waveform records.
"""

from .core import Record, RecordSet, change_name, override_state, checks_disabled
from .convolve import convolve_source_timefunction, make_source_timefunction


__all__ = [
    "Record",
    "RecordSet",
    "change_name",
    "override_state",
    "checks_disabled",
    "convolve_source_timefunction",
    "make_source_timefunction",
]
