# stfconv/core/__init__.py
"""
Core domain objects for stfconv.

This module defines the record data model and the services operations
build on:
- Record: one evenly (or unevenly) sampled waveform + header fields
- RecordSet: ordered collection of records processed together
- header access and the structure / header consistency checks
- process-wide check settings with scoped overrides
- record-name editing

The core layer is independent from file formats.
"""

from .record import Record, IFTYPES
from .recordset import RecordSet, RecordsLike, as_records
from .header import get_header, check_records, check_header
from .state import CheckState, get_state, set_state, override_state, checks_disabled, is_verbose
from .broadcast import expand_numbers, expand_strings
from .names import change_name
from .exceptions import (
    CoreError,
    StructuralValidationError,
    InvalidRecord,
    InvalidArgument,
    BatchError,
    InvalidHeader,
    IncompatibleRecordType,
    UnevenSamplingError,
    UnsupportedKernelType,
    RecordNotFound,
)


__all__ = [
    # records
    "Record",
    "IFTYPES",
    "RecordSet",
    "RecordsLike",
    "as_records",

    # collaborators
    "get_header",
    "check_records",
    "check_header",
    "change_name",
    "expand_numbers",
    "expand_strings",

    # settings
    "CheckState",
    "get_state",
    "set_state",
    "override_state",
    "checks_disabled",
    "is_verbose",

    # exceptions
    "CoreError",
    "StructuralValidationError",
    "InvalidRecord",
    "InvalidArgument",
    "BatchError",
    "InvalidHeader",
    "IncompatibleRecordType",
    "UnevenSamplingError",
    "UnsupportedKernelType",
    "RecordNotFound",
]
