"""Generation configuration system with frozen, hashable, serializable dataclasses."""

from csbm.config.experiment import (
    ExperimentConfig,
    InvalidConfigurationError,
    ModelConfig,
    SweepConfig,
    effective_snr,
)
from csbm.config.defaults import ANCHOR_CONFIG
from csbm.config.hashing import config_hash, full_config_hash, model_config_hash
from csbm.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)
from csbm.config.sweep import expand_sweep

__all__ = [
    "ExperimentConfig",
    "InvalidConfigurationError",
    "ModelConfig",
    "SweepConfig",
    "ANCHOR_CONFIG",
    "config_hash",
    "model_config_hash",
    "full_config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
    "effective_snr",
    "expand_sweep",
]
