"""Generation configuration dataclasses, all frozen and slotted."""

import math
import numbers
from dataclasses import dataclass, field


class InvalidConfigurationError(ValueError):
    """Raised when CSBM parameters are out of their valid domain."""


def effective_snr(config: "ModelConfig") -> float:
    """Compute the effective SNR ``lam**2 + mu**2 * P / N``.

    Pure function of the parameters; no randomness involved, so it can be
    used to filter configurations before any sampling happens.
    """
    return config.lam**2 + config.mu**2 * config.P / config.N


@dataclass(frozen=True, slots=True)
class ModelConfig:
    """Contextual SBM parameters.

    All real-valued fields are promoted to a single 64-bit ``float`` at
    construction time, and the whole record is validated eagerly so that
    no invalid configuration ever reaches the samplers.
    """

    N: int = 100  # graph size (number of nodes)
    P: int = 5  # feature dimension
    d: float = 5.0  # target average degree
    lam: float = 1.0  # SNR of the communities (lambda)
    mu: float = 1.0  # SNR of the features
    rho: float = 0.5  # fraction of labels revealed

    def __post_init__(self) -> None:
        """Promote numeric types and validate (uses object.__setattr__ since frozen)."""
        for name in ("N", "P"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidConfigurationError(
                    f"{name} must be an integer, got {value!r}"
                )
            object.__setattr__(self, name, int(value))
        for name in ("d", "lam", "mu", "rho"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidConfigurationError(
                    f"{name} must be a real number, got {value!r}"
                )
            value = float(value)
            if not math.isfinite(value):
                raise InvalidConfigurationError(f"{name} must be finite, got {value}")
            object.__setattr__(self, name, value)

        if self.N <= 0:
            raise InvalidConfigurationError(f"N must be positive, got {self.N}")
        if self.P <= 0:
            raise InvalidConfigurationError(f"P must be positive, got {self.P}")
        if self.d < 0:
            raise InvalidConfigurationError(
                f"d must be non-negative, got {self.d}"
            )
        if not 0.0 <= self.rho <= 1.0:
            raise InvalidConfigurationError(
                f"rho must lie in [0, 1], got {self.rho}"
            )
        if self.mu < 0:
            raise InvalidConfigurationError(
                f"mu must be non-negative (features are scaled by sqrt(mu / N)), "
                f"got {self.mu}"
            )

    @property
    def average_degree(self) -> float:
        return self.d

    @property
    def communities_snr(self) -> float:
        return self.lam

    @property
    def features_snr(self) -> float:
        return self.mu

    @property
    def revealed_fraction(self) -> float:
        return self.rho

    def effective_snr(self) -> float:
        """See :func:`effective_snr`."""
        return effective_snr(self)

    def affinities(self) -> tuple[float, float]:
        """Per-pair edge probabilities ``(p_in, p_out)`` for this config."""
        from csbm.generation.affinity import resolve_affinities

        return resolve_affinities(self.N, self.d, self.lam)


@dataclass(frozen=True, slots=True)
class SweepConfig:
    """Parameter grid. Expanded into single-point configs by ``expand_sweep``."""

    N_values: tuple[int, ...] = (100,)
    P_values: tuple[int, ...] = (5,)
    d_values: tuple[float, ...] = (5.0,)
    lam_values: tuple[float, ...] = (1.0,)
    mu_values: tuple[float, ...] = (1.0,)
    rho_values: tuple[float, ...] = (0.5,)
    seeds: tuple[int, ...] = (42, 123, 7)
    min_effective_snr: float | None = None
    max_effective_snr: float | None = None

    def __post_init__(self) -> None:
        for name in (
            "N_values",
            "P_values",
            "d_values",
            "lam_values",
            "mu_values",
            "rho_values",
            "seeds",
        ):
            if len(getattr(self, name)) == 0:
                raise InvalidConfigurationError(f"{name} must not be empty")
        if (
            self.min_effective_snr is not None
            and self.max_effective_snr is not None
            and self.min_effective_snr > self.max_effective_snr
        ):
            raise InvalidConfigurationError(
                f"min_effective_snr ({self.min_effective_snr}) must be "
                f"<= max_effective_snr ({self.max_effective_snr})"
            )


@dataclass(frozen=True, slots=True)
class ExperimentConfig:
    """Top-level configuration: model parameters plus seed and provenance.

    The model parameters validate themselves on construction; nothing
    here consumes randomness.
    """

    model: ModelConfig = field(default_factory=ModelConfig)
    sweep: SweepConfig | None = None
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.seed < 0:
            raise InvalidConfigurationError(
                f"seed must be non-negative, got {self.seed}"
            )
