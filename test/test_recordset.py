# test/test_recordset.py
import numpy as np
import pytest

from stfconv.core import Record, RecordSet, as_records
from stfconv.core import RecordNotFound, StructuralValidationError


def _rec(name: str, v, **kw):
    return Record(data=np.array(v, dtype=float), name=name, **kw)


def test_recordset_basic_access():
    r1 = _rec("A", [1, 2, 3])
    r2 = _rec("B", [4, 5])
    rs = RecordSet(records=[r1, r2], attrs={"event": "x"})

    assert len(rs) == 2
    assert rs[0] is r1
    assert list(rs) == [r1, r2]
    assert rs.names() == ["A", "B"]
    assert rs.by_name("B") is r2


def test_recordset_rejects_non_records():
    with pytest.raises(StructuralValidationError):
        RecordSet(records=[_rec("A", [1]), "not a record"])


def test_recordset_rejects_single_record():
    with pytest.raises(StructuralValidationError):
        RecordSet(records=_rec("A", [1]))


def test_recordset_missing_raises():
    rs = RecordSet(records=[_rec("A", [1])])
    with pytest.raises(RecordNotFound):
        _ = rs[5]
    with pytest.raises(KeyError):
        _ = rs.by_name("missing")


def test_select_shares_records_and_copy_does_not():
    r1 = _rec("A", [1])
    r2 = _rec("B", [2])
    rs = RecordSet(records=[r1, r2])

    sel = rs.select([1])
    assert sel.names() == ["B"]
    assert sel[0] is r2

    cp = rs.copy()
    assert cp[0] is not r1
    assert np.allclose(cp[0].data, r1.data)


def test_as_records_accepts_all_forms():
    r1 = _rec("A", [1])
    assert as_records(r1) == [r1]
    assert as_records([r1]) == [r1]
    assert as_records(RecordSet(records=[r1])) == [r1]

    with pytest.raises(StructuralValidationError):
        as_records("A")
    with pytest.raises(StructuralValidationError):
        as_records(3.0)


def test_as_records_rejects_one_shot_iterators():
    recs = [_rec("A", [1]), _rec("B", [2])]
    with pytest.raises(StructuralValidationError):
        as_records(r for r in recs)
    with pytest.raises(StructuralValidationError):
        as_records(iter(recs))
    assert as_records(tuple(recs)) == recs
