"""JSON serialization and deserialization for generation configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import Config as DaciteConfig
from dacite import from_dict

from csbm.config.experiment import ExperimentConfig, InvalidConfigurationError


def _to_float(value: Any) -> float:
    """Promote JSON integers to float; reject bools and strings."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfigurationError(f"expected a real number, got {value!r}")
    return float(value)


# cast=[tuple] turns JSON arrays back into tuples. The float hook lets integer
# literals such as "d": 5 populate float fields before the type check runs.
_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    type_hooks={float: _to_float},
    check_types=True,
    strict=True,
)


def config_to_json(config: ExperimentConfig) -> str:
    """Serialize an ExperimentConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> ExperimentConfig:
    """Deserialize a JSON string to an ExperimentConfig.

    Uses dacite with strict=True to reject unknown keys (catches schema drift).
    Parameter validation still happens in the dataclasses' __post_init__.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: ExperimentConfig) -> dict[str, Any]:
    """Convert an ExperimentConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> ExperimentConfig:
    """Reconstruct an ExperimentConfig from a plain dictionary."""
    return from_dict(data_class=ExperimentConfig, data=d, config=_DACITE_CONFIG)
