"""Tests for quaternion helpers."""
from __future__ import annotations

import math

import numpy as np
import pytest

from tick_smooth import quat

Z = (0.0, 0.0, 1.0)


class TestFromAxisAngle:
    def test_zero_angle_is_identity(self) -> None:
        np.testing.assert_allclose(quat.from_axis_angle(Z, 0.0), quat.identity())

    def test_axis_is_normalized(self) -> None:
        q = quat.from_axis_angle((0.0, 0.0, 5.0), math.pi)
        np.testing.assert_allclose(q, [0.0, 0.0, 0.0, 1.0], atol=1e-12)

    def test_zero_axis_gives_identity(self) -> None:
        np.testing.assert_array_equal(quat.from_axis_angle((0.0, 0.0, 0.0), 1.0), quat.identity())


class TestNormalize:
    def test_scales_to_unit(self) -> None:
        assert quat.norm(quat.normalize([2.0, 0.0, 0.0, 0.0])) == 1.0

    def test_zero_unchanged(self) -> None:
        np.testing.assert_array_equal(quat.normalize([0.0, 0.0, 0.0, 0.0]), np.zeros(4))


class TestMultiply:
    def test_identity_is_neutral(self) -> None:
        q = quat.from_axis_angle((1.0, 2.0, 3.0), 0.7)
        np.testing.assert_allclose(quat.multiply(quat.identity(), q), q)
        np.testing.assert_allclose(quat.multiply(q, quat.identity()), q)

    def test_angles_add_about_same_axis(self) -> None:
        q = quat.multiply(quat.from_axis_angle(Z, 0.3), quat.from_axis_angle(Z, 0.4))
        np.testing.assert_allclose(q, quat.from_axis_angle(Z, 0.7), atol=1e-12)


class TestAngleBetween:
    def test_same_rotation_either_sign(self) -> None:
        q = quat.from_axis_angle(Z, 1.0)
        assert quat.angle_between(q, -q) == pytest.approx(0.0, abs=1e-6)

    def test_known_angle(self) -> None:
        a = quat.from_axis_angle(Z, 0.2)
        b = quat.from_axis_angle(Z, 1.0)
        assert quat.angle_between(a, b) == pytest.approx(0.8)


class TestSlerp:
    def test_endpoints(self) -> None:
        a = quat.from_axis_angle(Z, 0.1)
        b = quat.from_axis_angle((1.0, 0.0, 0.0), 2.0)
        np.testing.assert_allclose(quat.slerp(a, b, 0.0), a, atol=1e-12)
        np.testing.assert_allclose(quat.slerp(a, b, 1.0), b, atol=1e-12)

    def test_constant_angular_speed(self) -> None:
        b = quat.from_axis_angle(Z, 2.0)
        for t in (0.1, 0.25, 0.8):
            q = quat.slerp(quat.identity(), b, t)
            assert quat.angle_between(quat.identity(), q) == pytest.approx(2.0 * t)

    def test_shortest_path_flips_hemisphere(self) -> None:
        b = quat.from_axis_angle(Z, 0.5)
        q = quat.slerp(quat.identity(), -b, 0.5)
        np.testing.assert_allclose(q, quat.from_axis_angle(Z, 0.25), atol=1e-12)

    def test_near_identical_inputs(self) -> None:
        a = quat.from_axis_angle(Z, 0.001)
        b = quat.from_axis_angle(Z, 0.002)
        q = quat.slerp(a, b, 0.5)
        assert quat.norm(q) == pytest.approx(1.0)
        assert quat.angle_between(a, q) == pytest.approx(0.0005, abs=1e-6)
