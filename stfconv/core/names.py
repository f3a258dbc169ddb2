# stfconv/core/names.py
from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .broadcast import expand_strings
from .exceptions import InvalidArgument
from .recordset import RecordsLike, as_records
from .state import is_verbose


_LOG = logging.getLogger(__name__)

_ALIASES = {
    "name": "name",
    "filename": "name",
    "file": "name",
    "prepend": "prepend",
    "append": "append",
    "delete": "delete",
    "change": "change",
}


def change_name(records: RecordsLike, *ops: tuple[str, Any]) -> RecordsLike:
    """
    Edit the `name` field of records.

    Each op is an (option, value) pair, applied in the order given:
      - ("name", s):    set the name (aliases: "filename", "file")
      - ("prepend", s): prepend s
      - ("append", s):  append s
      - ("delete", s):  delete every occurrence of s
      - ("change", (orig, repl)): replace every occurrence of orig with repl

    For name/prepend/append, s is a single string for all records or one
    string per record.

    delete and change take either one row applied to every record, or a
    list with one row per record:
      - delete row: a string or a list of strings, e.g.
        ["__", ".merged"] deletes both from every record, while for two
        records [["__"], [".merged"]] deletes "__" from the first only
      - change row: a flat list of orig/repl pairs, e.g.
        ("..", ".__.", "part1", "part2") for every record, or
        [("a", "X"), ("1", "Y")] with one row per record

    An empty value skips the op. Records are updated in place and returned.
    """
    recs = as_records(records)
    n = len(recs)

    if is_verbose():
        _LOG.info("Changing names of %d record(s)", n)

    for op in ops:
        try:
            option, value = op
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"options must be (option, value) pairs, got {op!r}") from e

        key = _ALIASES.get(str(option).lower())
        if key is None:
            raise InvalidArgument(f"unknown option {option!r}")

        if _is_empty(value):
            continue

        if key in ("name", "prepend", "append"):
            strings = expand_strings(value, n, key)
            for rec, s in zip(recs, strings):
                if key == "name":
                    rec.name = s
                elif key == "prepend":
                    rec.name = s + rec.name
                else:
                    rec.name = rec.name + s

        elif key == "delete":
            for rec, targets in zip(recs, _rows(value, n, key)):
                for s in targets:
                    rec.name = rec.name.replace(s, "")

        else:
            for rec, row in zip(recs, _rows(value, n, key)):
                if len(row) % 2:
                    raise InvalidArgument(
                        f"change expects (original, replacement) string pairs, got {row!r}"
                    )
                for orig, repl in zip(row[0::2], row[1::2]):
                    rec.name = rec.name.replace(orig, repl)

    return records


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, np.ndarray):
        return value.size == 0
    try:
        return len(value) == 0
    except TypeError:
        return False


def _rows(value: Any, n: int, option: str) -> list[list[str]]:
    """Expand a delete/change value to one list of strings per record."""
    if isinstance(value, str):
        return [[value]] * n

    items = _as_list(value, option)
    if all(isinstance(v, str) for v in items):
        return [items] * n

    rows = [[v] if isinstance(v, str) else _as_list(v, option) for v in items]
    if not all(isinstance(s, str) for row in rows for s in row):
        raise InvalidArgument(f"{option} expects strings, got {value!r}")
    if len(rows) == 1:
        return rows * n
    if len(rows) != n:
        raise InvalidArgument(
            f"{option} needs one row for all records or one per record ({n}), got {len(rows)}"
        )
    return rows


def _as_list(value: Any, option: str) -> list[Any]:
    if isinstance(value, np.ndarray):
        return list(value.ravel())
    if isinstance(value, (list, tuple)):
        return list(value)
    raise InvalidArgument(f"{option} expects a string or a list of strings, got {value!r}")
