# stfconv/core/recordset.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Sequence, Union

from .exceptions import RecordNotFound, StructuralValidationError
from .record import Record


@dataclass(frozen=True, slots=True)
class RecordSet:
    """
    RecordSet = ordered collection of Records processed together.

    Design goals:
    - sequence-like access: rs[0], len(rs), iteration in order
    - name lookup: rs.by_name("STA.BHZ")
    - the container is immutable; the Records it holds are not (pipeline
      operations update them in place)
    """
    records: tuple[Record, ...] = field(default_factory=tuple, repr=False)
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.records, Record):
            raise StructuralValidationError("RecordSet.records must be a sequence of Records.")

        try:
            records = tuple(self.records)
        except TypeError as e:
            raise StructuralValidationError("RecordSet.records must be iterable.") from e

        bad = [i for i, rec in enumerate(records) if not isinstance(rec, Record)]
        if bad:
            raise StructuralValidationError(
                f"RecordSet.records values must be Record instances (bad index: {bad})."
            )
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise StructuralValidationError("RecordSet.attrs must be a dict.")

        object.__setattr__(self, "records", records)

    # ---- sequence-like API ----
    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        try:
            return self.records[index]
        except IndexError as e:
            raise RecordNotFound(index) from e

    def names(self) -> list[str]:
        return [rec.name for rec in self.records]

    def by_name(self, name: str) -> Record:
        for rec in self.records:
            if rec.name == name:
                return rec
        raise RecordNotFound(name)

    # ---- transformations ----
    def select(self, indices: Iterable[int]) -> "RecordSet":
        """
        Keep only the given record indices (order preserved by `indices`).

        The selected Records are shared, not copied.
        """
        return RecordSet(records=tuple(self[i] for i in indices), attrs=self.attrs.copy())

    def copy(self) -> "RecordSet":
        """Deep copy: every Record is copied."""
        return RecordSet(records=tuple(rec.copy() for rec in self.records), attrs=self.attrs.copy())


RecordsLike = Union[RecordSet, Record, Sequence[Record]]


def as_records(records: RecordsLike) -> list[Record]:
    """Normalize a Record, RecordSet or sequence of Records to a list."""
    if isinstance(records, Record):
        return [records]
    if isinstance(records, RecordSet):
        return list(records.records)
    if isinstance(records, (str, bytes)) or not isinstance(records, Iterable):
        raise StructuralValidationError(
            f"expected a Record, RecordSet or sequence of Records, got {type(records).__name__}"
        )
    if isinstance(records, Iterator):
        raise StructuralValidationError(
            f"expected a re-iterable sequence of Records, got {type(records).__name__}"
        )
    return list(RecordSet(records=records).records)
