"""Expansion of a SweepConfig grid into single-point experiment configs."""

import itertools
import logging

from csbm.config.experiment import ExperimentConfig, ModelConfig
from csbm.config.hashing import full_config_hash

log = logging.getLogger(__name__)


def expand_sweep(config: ExperimentConfig) -> list[ExperimentConfig]:
    """Expand ``config.sweep`` into the cartesian product of its values.

    Grid points whose effective SNR falls outside
    ``[min_effective_snr, max_effective_snr]`` are dropped before any
    sampling. Invalid grid points raise InvalidConfigurationError from
    ModelConfig, and kept points whose edge probabilities leave [0, 1]
    raise DegenerateAffinityError, so a sweep fails as a whole before any
    point is sampled. Duplicate points are emitted once, in first-seen order.

    Args:
        config: Experiment config. Without a sweep, returns ``[config]``.

    Returns:
        List of ExperimentConfig with ``sweep=None``.
    """
    sweep = config.sweep
    if sweep is None:
        return [config]

    points: list[ExperimentConfig] = []
    seen: set[str] = set()
    n_filtered = 0

    grid = itertools.product(
        sweep.N_values,
        sweep.P_values,
        sweep.d_values,
        sweep.lam_values,
        sweep.mu_values,
        sweep.rho_values,
        sweep.seeds,
    )
    for N, P, d, lam, mu, rho, seed in grid:
        model = ModelConfig(N=N, P=P, d=d, lam=lam, mu=mu, rho=rho)
        snr = model.effective_snr()
        if sweep.min_effective_snr is not None and snr < sweep.min_effective_snr:
            n_filtered += 1
            continue
        if sweep.max_effective_snr is not None and snr > sweep.max_effective_snr:
            n_filtered += 1
            continue
        # Degenerate affinities surface here, before any point is sampled
        model.affinities()

        point = ExperimentConfig(
            model=model,
            sweep=None,
            seed=seed,
            description=config.description,
            tags=config.tags,
        )
        key = full_config_hash(point)
        if key in seen:
            continue
        seen.add(key)
        points.append(point)

    log.info(
        "Sweep expanded to %d points (%d filtered by effective SNR)",
        len(points),
        n_filtered,
    )
    return points
