"""Partial revelation of the true community labels."""

import numpy as np

from csbm.generation.types import UNKNOWN_LABEL


def sample_revealed(
    rng: np.random.Generator, u: np.ndarray, rho: float
) -> np.ndarray:
    """Reveal each label independently with probability ``rho``.

    One fresh uniform draw per node. Revealed entries equal ``u[i]``,
    withheld entries hold UNKNOWN_LABEL; a wrong label is never emitted.
    """
    draws = rng.random(len(u))
    revealed = np.full(len(u), UNKNOWN_LABEL, dtype=np.int8)
    hit = draws < rho
    revealed[hit] = u[hit]
    return revealed
