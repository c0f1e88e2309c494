"""Contextual SBM sampling: latents, graph, features and revealed labels."""

from csbm.generation.affinity import (
    DegenerateAffinityError,
    community_rates,
    resolve_affinities,
)
from csbm.generation.features import sample_features
from csbm.generation.generator import (
    SampleValidationError,
    effective_snr,
    generate_csbm,
    sample,
)
from csbm.generation.graph import sample_graph
from csbm.generation.latents import sample_centroid, sample_labels, sample_latents
from csbm.generation.mask import sample_revealed
from csbm.generation.types import UNKNOWN_LABEL, Latents, Observations
from csbm.generation.validation import sample_statistics, validate_sample

__all__ = [
    "DegenerateAffinityError",
    "Latents",
    "Observations",
    "SampleValidationError",
    "UNKNOWN_LABEL",
    "community_rates",
    "effective_snr",
    "generate_csbm",
    "resolve_affinities",
    "sample",
    "sample_centroid",
    "sample_features",
    "sample_graph",
    "sample_labels",
    "sample_latents",
    "sample_revealed",
    "sample_statistics",
    "validate_sample",
]
