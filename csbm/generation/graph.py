"""Pairwise Bernoulli sampling of the undirected block-structured graph.

Every unordered pair (i, j) with i < j receives exactly one uniform draw,
consumed in row-major order: (0,1), (0,2), ..., (0,N-1), (1,2), ...
The scan is O(N^2) in time; draws are taken one row at a time so memory
stays O(N + edges).
"""

import logging

import numpy as np
import scipy.sparse

from csbm.generation.affinity import check_probability

log = logging.getLogger(__name__)


def sample_graph(
    rng: np.random.Generator, u: np.ndarray, p_in: float, p_out: float
) -> scipy.sparse.csr_matrix:
    """Sample a symmetric, loop-free boolean adjacency matrix.

    Edge (i, j) is present iff its uniform draw is below ``p_in`` when
    ``u[i] == u[j]`` and below ``p_out`` otherwise.

    Args:
        rng: numpy random Generator, consumed N*(N-1)/2 times.
        u: Community labels of length N.
        p_in: Same-community edge probability.
        p_out: Cross-community edge probability.

    Returns:
        Sparse CSR adjacency matrix of shape (N, N) and dtype bool.

    Raises:
        DegenerateAffinityError: If either probability lies outside [0, 1].
            Raised before any draw.
    """
    check_probability("p_in", p_in)
    check_probability("p_out", p_out)

    n = len(u)
    rows: list[np.ndarray] = []
    cols: list[np.ndarray] = []

    for i in range(n - 1):
        draws = rng.random(n - i - 1)
        thresholds = np.where(u[i + 1 :] == u[i], p_in, p_out)
        js = np.flatnonzero(draws < thresholds) + (i + 1)
        if len(js):
            rows.append(np.full(len(js), i, dtype=np.int64))
            cols.append(js.astype(np.int64))

    if rows:
        upper_rows = np.concatenate(rows)
        upper_cols = np.concatenate(cols)
    else:
        upper_rows = np.empty(0, dtype=np.int64)
        upper_cols = np.empty(0, dtype=np.int64)

    # Mirror the upper triangle so that (i, j) implies (j, i)
    all_rows = np.concatenate([upper_rows, upper_cols])
    all_cols = np.concatenate([upper_cols, upper_rows])
    data = np.ones(len(all_rows), dtype=bool)
    adj = scipy.sparse.csr_matrix((data, (all_rows, all_cols)), shape=(n, n))

    log.debug(
        "Sampled graph: n=%d, p_in=%.4g, p_out=%.4g, edges=%d",
        n,
        p_in,
        p_out,
        len(upper_rows),
    )
    return adj
