"""
Tests for core/compute: precision helpers, random generation and the
shared elementwise kernel.
"""

import numpy as np
import pytest

from pylars.core import _elementwise
from pylars.core.compute import (
    DEFAULT_ATOL,
    DEFAULT_HIGH,
    DEFAULT_LOW,
    DEFAULT_RTOL,
    EPSILON_64,
    all_close,
    is_close,
    make_rng,
    uniform,
)
from pylars.core.exceptions import DivisionByZeroError, ValidationError


class TestPrecision:

    def test_epsilon(self):
        assert EPSILON_64 == np.finfo(np.float64).eps

    def test_defaults(self):
        assert DEFAULT_RTOL == 1e-12
        assert DEFAULT_ATOL == 1e-14

    def test_is_close_scalar(self):
        assert is_close(1.0, 1.0 + 1e-13)
        assert not is_close(1.0, 1.1)

    def test_all_close(self):
        a = np.array([1.0, 2.0, 3.0])
        assert all_close(a, a + 1e-15)
        assert not all_close(a, a + 1e-3)

    def test_all_close_custom_tolerance(self):
        a = np.array([1.0, 2.0])
        assert all_close(a, a + 1e-3, rtol=0.0, atol=1e-2)

    def test_negative_tolerance_rejected(self):
        a = np.array([1.0])
        with pytest.raises(ValueError, match="non-negative"):
            all_close(a, a, rtol=-1.0)


class TestRandom:

    def test_default_range(self):
        values = uniform(1000)
        assert values.dtype == np.float64
        assert values.shape == (1000,)
        assert np.all(values >= DEFAULT_LOW)
        assert np.all(values < DEFAULT_HIGH)

    def test_custom_range(self):
        values = uniform(500, low=-2.0, high=-1.0, seed=1)
        assert np.all(values >= -2.0)
        assert np.all(values < -1.0)

    def test_seed_reproducible(self):
        np.testing.assert_array_equal(uniform(10, seed=7), uniform(10, seed=7))

    def test_generator_passthrough(self, rng):
        assert make_rng(rng) is rng

    def test_generator_stream_advances(self, rng):
        first = uniform(5, seed=rng)
        second = uniform(5, seed=rng)
        assert not np.array_equal(first, second)

    @pytest.mark.parametrize("seed", ["42", 1.5, True])
    def test_bad_seed(self, seed):
        with pytest.raises(ValidationError, match="seed"):
            make_rng(seed)

    def test_empty_range_rejected(self):
        with pytest.raises(ValidationError, match="empty"):
            uniform(3, low=1.0, high=1.0)

    def test_infinite_range_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            uniform(3, low=0.0, high=np.inf)


class TestElementwiseKernel:

    def test_operations(self):
        a = np.array([6.0, 8.0])
        b = np.array([2.0, 4.0])
        np.testing.assert_array_equal(_elementwise.apply('add', a, b), [8.0, 12.0])
        np.testing.assert_array_equal(_elementwise.apply('subtract', a, b), [4.0, 4.0])
        np.testing.assert_array_equal(_elementwise.apply('multiply', a, b), [12.0, 32.0])
        np.testing.assert_array_equal(_elementwise.apply('divide', a, b), [3.0, 2.0])

    def test_result_is_new_array(self):
        a = np.array([1.0, 2.0])
        result = _elementwise.apply('add', a, 0.0)
        result[0] = 5.0
        assert a[0] == 1.0

    def test_zero_divisor_positions(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            _elementwise.apply('divide', np.ones(4), np.array([1.0, 0.0, 2.0, 0.0]))
        assert exc_info.value.positions == (1, 3)

    def test_negative_zero_divisor(self):
        with pytest.raises(DivisionByZeroError):
            _elementwise.apply('divide', np.ones(1), np.array([-0.0]))

    def test_zero_scalar_divisor(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            _elementwise.apply('divide', np.ones(2), 0.0)
        assert exc_info.value.positions == ()

    def test_scalar_numerator(self):
        np.testing.assert_array_equal(
            _elementwise.apply('divide', 1.0, np.array([2.0, 4.0])), [0.5, 0.25]
        )

    def test_overflow_saturates(self):
        big = np.array([1e308])
        result = _elementwise.apply('multiply', big, big)
        assert np.isinf(result[0])

    def test_read_only_view(self):
        data = np.array([1.0, 2.0])
        view = _elementwise.read_only(data)
        assert np.shares_memory(view, data)
        with pytest.raises(ValueError):
            view[0] = 3.0

    def test_freeze_owned_array(self):
        data = np.array([1.0, 2.0])
        frozen = _elementwise.freeze(data)
        assert frozen is data
        assert not frozen.flags.writeable
        view = _elementwise.read_only(frozen)
        with pytest.raises(ValueError):
            view.flags.writeable = True

    def test_freeze_copies_views(self):
        base = np.array([[1.0, 2.0], [3.0, 4.0]])
        frozen = _elementwise.freeze(base.reshape(-1))
        assert frozen.base is None
        assert not np.shares_memory(frozen, base)
        assert base.flags.writeable

    @pytest.mark.parametrize("value,expected", [
        (1, True), (1.5, True), (np.float64(2.0), True),
        (True, False), ("1", False), (None, False), (1j, False),
    ])
    def test_is_scalar(self, value, expected):
        assert _elementwise.is_scalar(value) is expected
