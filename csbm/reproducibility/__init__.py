"""Reproducibility infrastructure: seeded Generators and determinism checks."""

from csbm.reproducibility.seed import make_rng, verify_sample_determinism

__all__ = [
    "make_rng",
    "verify_sample_determinism",
]
