"""Seed handling and determinism self-test for CSBM sampling.

All randomness flows through one numpy Generator that the caller passes
to ``sample``. Bit-for-bit reproducibility relies on the fixed draw
order: labels, centroid, graph, features, mask.
"""

import numpy as np

from csbm.config.experiment import ModelConfig
from csbm.generation.generator import sample


def make_rng(seed: int) -> np.random.Generator:
    """Build the numpy Generator used for one sampling call."""
    return np.random.default_rng(seed)


def verify_sample_determinism(config: ModelConfig, seed: int) -> bool:
    """Verify that the same seed yields an identical sample.

    Draws twice from fresh Generators seeded with ``seed`` and compares
    u, v, the adjacency, the features and the revealed labels exactly.
    This is the self-test that proves seed control works.

    Args:
        config: Model parameters.
        seed: Seed value to test.

    Returns:
        True if both draws are identical.
    """
    latents_1, obs_1 = sample(make_rng(seed), config)
    latents_2, obs_2 = sample(make_rng(seed), config)

    return (
        np.array_equal(latents_1.u, latents_2.u)
        and np.array_equal(latents_1.v, latents_2.v)
        and (obs_1.adjacency != obs_2.adjacency).nnz == 0
        and np.array_equal(obs_1.features, obs_2.features)
        and np.array_equal(obs_1.revealed, obs_2.revealed)
    )
