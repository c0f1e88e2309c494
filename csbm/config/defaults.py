"""Anchor configuration: the single source of default generation parameters."""

from csbm.config.experiment import ExperimentConfig

# Anchor config with all-default values: N=100, P=5, d=5, lam=1, mu=1,
# rho=0.5, seed=42. Small enough to sample in milliseconds.
ANCHOR_CONFIG = ExperimentConfig()
