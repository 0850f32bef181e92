"""4x4 transform matrix constructors for use as mapping functions.

Matrices are numpy arrays acting on column vectors, so ``b @ a`` applies
``a`` first and ``b`` second.
"""
from __future__ import annotations

import math

import numpy as np

Mat4 = np.ndarray


def identity() -> Mat4:
    return np.eye(4)


def translation(v) -> Mat4:
    m = np.eye(4)
    m[:3, 3] = np.asarray(v, dtype=float)
    return m


def scale(s) -> Mat4:
    """Uniform scale from a float, per-axis scale from a 3-vector."""
    m = np.eye(4)
    m[:3, :3] = np.diag(np.broadcast_to(np.asarray(s, dtype=float), (3,)))
    return m


def rotation(q) -> Mat4:
    """Rotation matrix from a unit quaternion ``(w, x, y, z)``."""
    w, x, y, z = q
    m = np.eye(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return m


def rotation_y(angle: float) -> Mat4:
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4)
    m[0, 0], m[0, 2] = c, s
    m[2, 0], m[2, 2] = -s, c
    return m


def rotation_z(angle: float) -> Mat4:
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4)
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


def look_at(eye, target, up=(0.0, 1.0, 0.0)) -> Mat4:
    """Right-handed view matrix looking from ``eye`` toward ``target``."""
    eye = np.asarray(eye, dtype=float)
    f = np.asarray(target, dtype=float) - eye
    f = f / np.linalg.norm(f)
    s = np.cross(f, np.asarray(up, dtype=float))
    s = s / np.linalg.norm(s)
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3], m[0, 3] = s, -np.dot(s, eye)
    m[1, :3], m[1, 3] = u, -np.dot(u, eye)
    m[2, :3], m[2, 3] = -f, np.dot(f, eye)
    return m


def transform_point(m: Mat4, p) -> np.ndarray:
    """Apply ``m`` to a 3D point (w = 1) and return the 3D result."""
    h = m @ np.append(np.asarray(p, dtype=float), 1.0)
    return h[:3] / h[3]
