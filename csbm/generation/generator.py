"""Contextual SBM sampler: one call draws latents and all observations.

Implements the two-community contextual stochastic block model of
Deshpande et al. (2018), in the parameterization of
https://arxiv.org/abs/2306.07948: a sparse SBM graph and a Gaussian
feature matrix coupled through the same hidden labels, plus a partially
revealed copy of those labels.
"""

import logging

import numpy as np

from csbm.config.experiment import ExperimentConfig, ModelConfig, effective_snr
from csbm.generation.affinity import resolve_affinities
from csbm.generation.features import sample_features
from csbm.generation.graph import sample_graph
from csbm.generation.latents import sample_latents
from csbm.generation.mask import sample_revealed
from csbm.generation.types import Latents, Observations
from csbm.generation.validation import validate_sample

log = logging.getLogger(__name__)

__all__ = ["SampleValidationError", "effective_snr", "generate_csbm", "sample"]


class SampleValidationError(Exception):
    """Raised when a generated sample violates the output contract."""


def sample(
    rng: np.random.Generator, config: ModelConfig
) -> tuple[Latents, Observations]:
    """Draw one (latents, observations) pair from the contextual SBM.

    Affinities are resolved before any randomness is consumed, so invalid
    parameters leave ``rng`` untouched. Draw order is fixed: labels,
    centroid, graph, features, mask. The same labels drive the graph, the
    features and the mask.

    Args:
        rng: numpy random Generator; its state advances.
        config: Model parameters.

    Returns:
        Tuple ``(latents, observations)``.

    Raises:
        DegenerateAffinityError: If ``(N, d, lam)`` yields a probability
            outside [0, 1].
    """
    p_in, p_out = resolve_affinities(config.N, config.d, config.lam)

    latents = sample_latents(rng, config)
    adjacency = sample_graph(rng, latents.u, p_in, p_out)
    features = sample_features(rng, latents.u, latents.v, config.mu)
    revealed = sample_revealed(rng, latents.u, config.rho)

    observations = Observations(
        adjacency=adjacency, features=features, revealed=revealed
    )
    return latents, observations


def generate_csbm(
    config: ExperimentConfig, validate: bool = True
) -> tuple[Latents, Observations]:
    """Seed a fresh Generator from ``config.seed`` and draw one sample.

    There is no retry loop: sampling is deterministic given the seed, so a
    failed sample would fail again.

    Args:
        config: Experiment configuration.
        validate: Run ``validate_sample`` on the result.

    Returns:
        Tuple ``(latents, observations)``.

    Raises:
        SampleValidationError: If validation reports any problem.
    """
    model = config.model
    rng = np.random.default_rng(config.seed)
    latents, observations = sample(rng, model)

    if validate:
        errors = validate_sample(latents, observations, model)
        if errors:
            raise SampleValidationError(
                f"Generated sample is invalid: {'; '.join(errors)}"
            )

    log.info(
        "CSBM sample generated (N=%d, P=%d, seed=%d, edges=%d, revealed=%d, "
        "effective_snr=%.4g)",
        model.N,
        model.P,
        config.seed,
        observations.n_edges,
        int(observations.revealed_mask.sum()),
        effective_snr(model),
    )
    return latents, observations
