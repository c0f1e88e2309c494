"""Sampling of the hidden community labels and feature centroid."""

import numpy as np

from csbm.config.experiment import ModelConfig
from csbm.generation.types import Latents


def sample_labels(rng: np.random.Generator, N: int) -> np.ndarray:
    """Draw N independent fair coin flips over {-1, +1} as an int8 array."""
    return rng.choice(np.array([-1, 1], dtype=np.int8), size=N)


def sample_centroid(rng: np.random.Generator, P: int) -> np.ndarray:
    """Draw P independent standard normals."""
    return rng.standard_normal(P)


def sample_latents(rng: np.random.Generator, config: ModelConfig) -> Latents:
    """Draw labels, then centroid. The two are independent at draw time."""
    u = sample_labels(rng, config.N)
    v = sample_centroid(rng, config.P)
    return Latents(u=u, v=v)
