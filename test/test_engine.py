# test/test_engine.py
import numpy as np
import pytest

from stfconv.convolve.engine import convolve_samples, convolve_records, apply_results, output_dtype
from stfconv.core import Record, InvalidArgument


def test_centered_kernel_splits_full_convolution():
    data = np.array([1.0, 2.0, 3.0, 4.0])
    kern = np.array([0.25, 0.5, 0.25])
    res = convolve_samples(data, kern, delay=-1)

    full = np.convolve(data, kern)
    assert res.beginning.tolist() == [full[0]]
    assert np.allclose(res.data, full[1:5])
    assert res.ending.tolist() == [full[5]]
    assert np.allclose(res.full, full)


def test_zero_delay_has_no_beginning_tail():
    data = np.array([1.0, 0.0, 0.0])
    res = convolve_samples(data, np.array([1.0, 2.0, 3.0]), delay=0)

    assert res.beginning.size == 0
    assert np.allclose(res.data, [1.0, 2.0, 3.0])
    assert np.allclose(res.ending, [0.0, 0.0])


def test_positive_delay_shifts_later_and_pads():
    data = np.array([1.0, 0.0, 0.0, 0.0])
    res = convolve_samples(data, np.array([1.0]), delay=2)

    assert res.beginning.size == 0
    assert np.allclose(res.data, [0.0, 0.0, 1.0, 0.0])
    # the last two input samples land past the record end
    assert np.allclose(res.ending, [0.0, 0.0])


def test_energy_is_conserved_across_split():
    rng = np.random.default_rng(0)
    data = rng.normal(size=50)
    kern = rng.random(9)
    res = convolve_samples(data, kern, delay=-4)

    total = res.data.sum() + res.beginning.sum() + res.ending.sum()
    assert total == pytest.approx(np.convolve(data, kern).sum())
    assert res.beginning.size == 4
    assert res.ending.size == 4


def test_multicomponent_convolves_each_column():
    data = np.column_stack([np.arange(5.0), -np.arange(5.0)])
    kern = np.array([0.5, 0.5])
    res = convolve_samples(data, kern, delay=-1)

    assert res.data.shape == (5, 2)
    assert res.beginning.shape == (1, 2)
    assert res.ending.shape == (0, 2)
    assert np.allclose(res.full[:, 0], np.convolve(data[:, 0], kern))
    assert np.allclose(res.full[:, 1], -res.full[:, 0])


def test_dtype_preserved_for_float32_and_promoted_for_int():
    assert output_dtype(np.zeros(2, dtype=np.float32)) == np.float32
    assert output_dtype(np.zeros(2, dtype=np.int16)) == np.float64

    res = convolve_samples(np.ones(3, dtype=np.float32), np.array([1.0, 1.0]), delay=0)
    assert res.data.dtype == np.float32
    assert res.ending.dtype == np.float32


def test_convolve_records_is_pure_until_applied():
    rec = Record(data=np.array([0.0, 1.0, 0.0]), b=5.0)
    results = convolve_records([rec], [np.array([0.5, 1.0, 0.5])], [-1])

    assert np.allclose(rec.data, [0.0, 1.0, 0.0])

    apply_results([rec], results)
    assert np.allclose(rec.data, [0.5, 1.0, 0.5])
    assert rec.b == 5.0
    assert rec.depmax == 1.0


def test_convolve_records_length_mismatch():
    rec = Record(data=np.array([1.0]))
    with pytest.raises(InvalidArgument):
        convolve_records([rec], [], [0])


@pytest.mark.parametrize("delay", [-2, 0, 3])
def test_empty_buffer_gives_empty_result_and_tails(delay):
    res = convolve_samples(np.array([]), np.array([0.25, 0.5, 0.25]), delay=delay)
    assert res.data.size == 0
    assert res.beginning.size == 0
    assert res.ending.size == 0

    res = convolve_samples(np.zeros((0, 2)), np.array([1.0, 1.0]), delay=-1)
    assert res.full.shape == (0, 2)
