"""Unit quaternion helpers operating on numpy arrays in (w, x, y, z) order."""
from __future__ import annotations

import math

import numpy as np

Quat = np.ndarray

# Above this cosine the arc is short enough that a normalized lerp is exact
# to float precision and avoids dividing by a vanishing sine.
_NLERP_THRESHOLD = 0.9995


def identity() -> Quat:
    return np.array([1.0, 0.0, 0.0, 0.0])


def from_axis_angle(axis, angle: float) -> Quat:
    axis = np.asarray(axis, dtype=float)
    mag = np.linalg.norm(axis)
    if mag == 0.0:
        return identity()
    half = angle * 0.5
    return np.concatenate(([math.cos(half)], axis * (math.sin(half) / mag)))


def norm(q: Quat) -> float:
    return float(np.linalg.norm(q))


def normalize(q: Quat) -> Quat:
    q = np.asarray(q, dtype=float)
    mag = np.linalg.norm(q)
    if mag == 0.0:
        return q
    return q / mag


def dot(a: Quat, b: Quat) -> float:
    return float(np.dot(a, b))


def multiply(a: Quat, b: Quat) -> Quat:
    """Hamilton product ``a * b``: rotate by ``b`` first, then by ``a``."""
    aw, ax, ay, az = a
    bw, bx, by, bz = b
    return np.array([
        aw * bw - ax * bx - ay * by - az * bz,
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
    ])


def angle_between(a: Quat, b: Quat) -> float:
    """Smallest rotation angle (radians) taking orientation ``a`` to ``b``."""
    d = min(abs(dot(normalize(a), normalize(b))), 1.0)
    return 2.0 * math.acos(d)


def slerp(a: Quat, b: Quat, t: float) -> Quat:
    """Spherical interpolation from ``a`` toward ``b`` along the shortest arc.

    ``q`` and ``-q`` encode the same rotation, so when the two inputs lie in
    opposite hemispheres ``b`` is negated before blending.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    d = float(np.dot(a, b))
    if d < 0.0:
        b = -b
        d = -d

    if d > _NLERP_THRESHOLD:
        return normalize(a + (b - a) * t)

    theta_0 = math.acos(min(d, 1.0))
    theta = theta_0 * t
    sin_0 = math.sin(theta_0)
    s1 = math.sin(theta) / sin_0
    s0 = math.cos(theta) - d * s1
    return a * s0 + b * s1
