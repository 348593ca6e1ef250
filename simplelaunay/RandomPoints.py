import math

import numpy as np


def random_points_in_triangle(n, A, B, C, seed=42):
    """
    Draw n points uniformly inside triangle ABC.
    """
    rng = np.random.default_rng(seed)
    u = rng.random(n)
    v = rng.random(n)
    # reflect (u, v) back into u + v <= 1
    mask = u + v > 1
    u[mask] = 1 - u[mask]
    v[mask] = 1 - v[mask]
    A, B, C = np.asarray(A, dtype=float), np.asarray(B, dtype=float), np.asarray(C, dtype=float)
    return A + u[:, None] * (B - A) + v[:, None] * (C - A)


def random_points_in_box(n, seed=42, x_range=(0.0, 1.0), y_range=(0.0, 1.0)):
    rng = np.random.default_rng(seed)
    xs = rng.uniform(x_range[0], x_range[1], n)
    ys = rng.uniform(y_range[0], y_range[1], n)
    return np.column_stack([xs, ys])


def random_points_in_disk(n, radius=1.0, center=(0.0, 0.0), seed=42):
    rng = np.random.default_rng(seed)
    r = radius * np.sqrt(rng.random(n))
    theta = rng.uniform(0.0, 2 * math.pi, n)
    return np.column_stack([center[0] + r * np.cos(theta), center[1] + r * np.sin(theta)])


def regular_polygon(k, radius=1.0, center=(0.0, 0.0), phase=math.pi / 2):
    """Vertices of a regular k-gon, counter-clockwise, first vertex at `phase`."""
    angles = phase + 2 * math.pi * np.arange(k) / k
    return np.column_stack([center[0] + radius * np.cos(angles), center[1] + radius * np.sin(angles)])
