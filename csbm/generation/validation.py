"""Structural validation and summary statistics for generated CSBM samples."""

import logging

import numpy as np

from csbm.config.experiment import ModelConfig
from csbm.generation.types import UNKNOWN_LABEL, Latents, Observations

log = logging.getLogger(__name__)


def validate_sample(
    latents: Latents, observations: Observations, config: ModelConfig
) -> list[str]:
    """Validate a sample against the CSBM output contract.

    Checks (cheapest first):
    1. Latent and observation shapes match (N, P)
    2. Labels are in {-1, +1}
    3. Adjacency is boolean with no self-loops
    4. Adjacency is symmetric
    5. Revealed labels are either the true label or UNKNOWN_LABEL

    Args:
        latents: Hidden labels and centroid.
        observations: Graph, features and revealed labels.
        config: Parameters the sample was drawn from.

    Returns:
        List of error strings (empty = valid sample).
    """
    errors: list[str] = []
    N, P = config.N, config.P
    adj = observations.adjacency

    # 1. Shapes
    if latents.u.shape != (N,):
        errors.append(f"u has shape {latents.u.shape}, expected ({N},)")
    if latents.v.shape != (P,):
        errors.append(f"v has shape {latents.v.shape}, expected ({P},)")
    if adj.shape != (N, N):
        errors.append(f"Adjacency has shape {adj.shape}, expected ({N}, {N})")
    if observations.features.shape != (P, N):
        errors.append(
            f"Features have shape {observations.features.shape}, "
            f"expected ({P}, {N})"
        )
    if observations.revealed.shape != (N,):
        errors.append(
            f"Revealed labels have shape {observations.revealed.shape}, "
            f"expected ({N},)"
        )
    if errors:
        # Element-wise checks below assume consistent shapes
        return errors

    # 2. Label alphabet
    if not np.isin(latents.u, (-1, 1)).all():
        errors.append("Labels u contain values outside {-1, +1}")

    # 3. Boolean entries, no self-loops
    if adj.dtype != np.bool_:
        errors.append(f"Adjacency dtype is {adj.dtype}, expected bool")
    diag_sum = int(adj.diagonal().sum())
    if diag_sum != 0:
        errors.append(f"Self-loops detected: diagonal sum = {diag_sum}")

    # 4. Symmetry
    asymmetric = (adj != adj.T).nnz
    if asymmetric != 0:
        errors.append(f"Adjacency is not symmetric: {asymmetric} mismatched entries")

    # 5. Revealed labels never contradict u
    revealed = observations.revealed
    bad = (revealed != UNKNOWN_LABEL) & (revealed != latents.u)
    n_bad = int(bad.sum())
    if n_bad:
        errors.append(f"{n_bad} revealed labels disagree with the true labels")

    return errors


def sample_statistics(
    latents: Latents, observations: Observations
) -> dict[str, float]:
    """Summary statistics of one sample, for sanity checks and logging.

    Returns:
        Dict with keys:
        - ``average_degree``: 2 * edges / N
        - ``intra_edges`` / ``inter_edges``: edge counts within / across
          communities
        - ``empirical_p_in`` / ``empirical_p_out``: edge counts divided by
          the number of same / different-community pairs (NaN when there
          are no such pairs)
        - ``revealed_fraction``: fraction of nodes with a revealed label
        - ``feature_overlap``: mean over nodes of ``u[i] * <v, B[:, i]> / |v|``,
          whose expectation is ``sqrt(mu / N) * |v|``
    """
    u = latents.u.astype(np.int64)
    v = latents.v
    N = len(u)

    edges = observations.edge_list()
    if len(edges):
        same = u[edges[:, 0]] == u[edges[:, 1]]
        intra = int(same.sum())
        inter = int(len(edges) - intra)
    else:
        intra = inter = 0

    n_plus = int((u == 1).sum())
    n_minus = N - n_plus
    same_pairs = n_plus * (n_plus - 1) // 2 + n_minus * (n_minus - 1) // 2
    cross_pairs = n_plus * n_minus

    v_norm = float(np.linalg.norm(v))
    if v_norm > 0:
        projections = v @ observations.features / v_norm
        feature_overlap = float(np.mean(u * projections))
    else:
        feature_overlap = float("nan")

    stats = {
        "average_degree": 2.0 * len(edges) / N,
        "intra_edges": float(intra),
        "inter_edges": float(inter),
        "empirical_p_in": intra / same_pairs if same_pairs else float("nan"),
        "empirical_p_out": inter / cross_pairs if cross_pairs else float("nan"),
        "revealed_fraction": float(observations.revealed_mask.mean()),
        "feature_overlap": feature_overlap,
    }
    log.debug("Sample statistics: %s", stats)
    return stats
