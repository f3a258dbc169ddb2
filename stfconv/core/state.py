# stfconv/core/state.py
"""
Process-wide settings consulted by the collaborator checks.

State is never toggled bare: callers that need a different setting for
the duration of an operation use override_state() (or checks_disabled()),
which restores the previous value on every exit path.
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import ContextManager, Iterator


@dataclass(frozen=True, slots=True)
class CheckState:
    """
    check_structure: run check_records() on entry to operations
    check_header: run check_header() on entry to operations
    verbose: emit progress notices (INFO log records)
    """
    check_structure: bool = True
    check_header: bool = True
    verbose: bool = False


_STATE = CheckState()


def get_state() -> CheckState:
    return _STATE


def set_state(**changes: bool) -> CheckState:
    """Update settings; returns the previous state."""
    global _STATE
    old = _STATE
    _STATE = replace(_STATE, **changes)
    return old


def restore_state(state: CheckState) -> None:
    global _STATE
    _STATE = state


@contextmanager
def override_state(**changes: bool) -> Iterator[CheckState]:
    old = set_state(**changes)
    try:
        yield _STATE
    finally:
        restore_state(old)


def checks_disabled() -> ContextManager[CheckState]:
    """Turn off structure and header checks for nested calls."""
    return override_state(check_structure=False, check_header=False)


def is_verbose() -> bool:
    return _STATE.verbose
