"""Gaussian node features shifted by the rank-one label/centroid signal."""

import math

import numpy as np


def sample_features(
    rng: np.random.Generator, u: np.ndarray, v: np.ndarray, mu: float
) -> np.ndarray:
    """Draw the (P, N) feature matrix ``B = Z + sqrt(mu / N) * v u^T``.

    ``Z`` has i.i.d. standard normal entries, so column i is noise plus
    ``sqrt(mu / N) * u[i] * v``. The 1/N scaling keeps ``mu`` (not N) in
    charge of detectability. ``mu = 0`` gives pure noise.
    """
    P, N = len(v), len(u)
    B = rng.standard_normal((P, N))
    B += math.sqrt(mu / N) * np.outer(v, u)
    return B
