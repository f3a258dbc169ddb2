# test/test_record.py
import numpy as np
import pytest

from stfconv.core.record import Record
from stfconv.core.exceptions import InvalidRecord


def test_init_ok_basic():
    rec = Record(data=np.array([1.0, -2.0, 4.0]), delta=0.5, b=10.0, name="STA.BHZ")

    assert rec.npts == 3
    assert rec.b == 10.0
    assert rec.e == 11.0
    assert rec.depmin == -2.0
    assert rec.depmax == 4.0
    assert rec.depmen == 1.0
    assert rec.iftype == "itime"
    assert rec.leven is True
    assert np.allclose(rec.time, [10.0, 10.5, 11.0])


def test_init_rejects_3d_data():
    with pytest.raises(InvalidRecord):
        Record(data=np.zeros((2, 2, 2)))


def test_init_rejects_non_numeric_data():
    with pytest.raises(InvalidRecord):
        Record(data=np.array(["a", "b"]))


@pytest.mark.parametrize("delta", [0.0, -1.0, np.inf, np.nan])
def test_init_rejects_bad_delta(delta):
    with pytest.raises(InvalidRecord):
        Record(data=np.array([1.0]), delta=delta)


def test_init_rejects_unknown_iftype():
    with pytest.raises(InvalidRecord):
        Record(data=np.array([1.0]), iftype="ispectrum")


def test_iftype_is_lowercased():
    rec = Record(data=np.array([1.0]), iftype="IXY")
    assert rec.iftype == "ixy"


def test_set_data_updates_stats_keeps_b():
    rec = Record(data=np.array([1.0, 2.0]), delta=2.0, b=1.0)
    rec.set_data(np.array([5.0, 6.0, 7.0]))

    assert rec.npts == 3
    assert rec.b == 1.0
    assert rec.e == 5.0
    assert rec.depmax == 7.0
    assert rec.depmen == 6.0


def test_set_data_rejects_component_change():
    rec = Record(data=np.zeros((3, 2)))
    with pytest.raises(InvalidRecord):
        rec.set_data(np.zeros(3))


def test_attach_both_ends():
    rec = Record(data=np.array([1.0, 2.0]), delta=0.5, b=0.0)
    rec.attach(beginning=[9.0, 8.0, 7.0], ending=[-1.0])

    assert np.allclose(rec.data, [9.0, 8.0, 7.0, 1.0, 2.0, -1.0])
    assert rec.b == -1.5
    assert rec.e == 1.0
    assert rec.npts == 6
    assert rec.depmin == -1.0
    assert rec.depmax == 9.0


def test_attach_empty_is_noop():
    rec = Record(data=np.array([1.0, 2.0]), b=3.0)
    rec.attach(beginning=np.array([]), ending=None)

    assert rec.b == 3.0
    assert rec.e == 4.0
    assert np.allclose(rec.data, [1.0, 2.0])


def test_attach_multicomponent():
    rec = Record(data=np.ones((2, 3)))
    rec.attach(ending=np.zeros((1, 3)))
    assert rec.data.shape == (3, 3)
    assert rec.ncmp == 3

    with pytest.raises(InvalidRecord):
        rec.attach(ending=np.zeros((1, 2)))


def test_copy_is_independent():
    rec = Record(data=np.array([1.0, 2.0]), header={"kstnm": "ABC"})
    cp = rec.copy()
    cp.data[0] = 100.0
    cp.header["kstnm"] = "XYZ"

    assert rec.data[0] == 1.0
    assert rec.header["kstnm"] == "ABC"


def test_to_numpy_copy_flag():
    rec = Record(data=np.array([1.0, 2.0, 3.0]))

    _, v_view = rec.to_numpy(copy=False)
    t_cp, v_cp = rec.to_numpy(copy=True)

    assert v_view is rec.data
    assert v_cp is not rec.data
    assert np.allclose(t_cp, [0.0, 1.0, 2.0])
