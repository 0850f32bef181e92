"""Tests for the built-in smoothing steps."""
from __future__ import annotations

import numpy as np
import pytest

from tick_smooth import SMOOTHERS, linear, quat, rotational
from tick_smooth.smoothers import resolve


class TestLinear:
    def test_float_midpoint(self) -> None:
        assert linear(0.0, 10.0, 0.5) == 5.0

    def test_alpha_zero_keeps_current(self) -> None:
        assert linear(3.0, 10.0, 0.0) == 3.0

    def test_array(self) -> None:
        result = linear(np.array([0.0, 2.0]), np.array([4.0, -2.0]), 0.25)
        np.testing.assert_allclose(result, [1.0, 1.0])

    def test_does_not_mutate_inputs(self) -> None:
        current = np.array([0.0, 0.0])
        linear(current, np.array([1.0, 1.0]), 0.5)
        np.testing.assert_array_equal(current, [0.0, 0.0])


class TestRotational:
    def test_result_is_unit(self) -> None:
        a = quat.from_axis_angle((1.0, 0.0, 0.0), 0.3)
        b = quat.from_axis_angle((0.0, 1.0, 0.0), 2.0)
        assert quat.norm(rotational(a, b, 0.37)) == pytest.approx(1.0)

    def test_renormalizes_drifted_input(self) -> None:
        drifted = quat.identity() * 1.001
        assert quat.norm(rotational(drifted, drifted, 0.5)) == pytest.approx(1.0)

    def test_halfway_angle(self) -> None:
        b = quat.from_axis_angle((0.0, 0.0, 1.0), 1.0)
        mid = rotational(quat.identity(), b, 0.5)
        np.testing.assert_allclose(mid, quat.from_axis_angle((0.0, 0.0, 1.0), 0.5), atol=1e-12)


class TestRegistry:
    def test_registered_names(self) -> None:
        assert SMOOTHERS["linear"] is linear
        assert SMOOTHERS["rotational"] is rotational

    def test_resolve_name(self) -> None:
        assert resolve("linear") is linear

    def test_resolve_callable_passes_through(self) -> None:
        def custom(current, target, alpha):
            return target

        assert resolve(custom) is custom

    def test_resolve_unknown_lists_known(self) -> None:
        with pytest.raises(KeyError, match="linear, rotational"):
            resolve("spring")
