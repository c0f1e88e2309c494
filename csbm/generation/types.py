"""Data structures for CSBM samples: hidden latents and observed data."""

from dataclasses import dataclass

import numpy as np
import scipy.sparse

# Sentinel stored in the revealed-label vector for nodes whose label is withheld.
UNKNOWN_LABEL = 0


def _freeze(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


@dataclass(frozen=True)
class Latents:
    """Hidden variables drawn once per sample.

    Uses frozen=True but omits slots=True since numpy arrays don't interact
    well with __slots__. The record takes ownership of the arrays it is
    given: they are marked read-only in place, not copied.
    """

    u: np.ndarray  # int8 array of length N, community labels in {-1, +1}
    v: np.ndarray  # float64 array of length P, feature centroid

    def __post_init__(self) -> None:
        _freeze(self.u)
        _freeze(self.v)


@dataclass(frozen=True)
class Observations:
    """Observed data generated from the latents.

    The graph is carried as its adjacency matrix: any representation with
    a symmetric, loop-free, unweighted edge set would do, and a sparse
    matrix is what downstream code consumes most directly.

    Like :class:`Latents`, the record takes ownership of its arrays and marks
    them read-only in place, including the adjacency's ``data`` buffer. Pass
    copies if the caller still needs writable arrays.
    """

    adjacency: scipy.sparse.csr_matrix  # bool (N x N), symmetric, zero diagonal
    features: np.ndarray  # float64 (P x N), column i is node i's feature vector
    revealed: np.ndarray  # int8 length N, u[i] or UNKNOWN_LABEL

    def __post_init__(self) -> None:
        _freeze(self.adjacency.data)
        _freeze(self.features)
        _freeze(self.revealed)

    @property
    def n_nodes(self) -> int:
        return self.adjacency.shape[0]

    @property
    def n_edges(self) -> int:
        """Number of undirected edges (each stored twice in the adjacency)."""
        return self.adjacency.nnz // 2

    @property
    def degrees(self) -> np.ndarray:
        return np.asarray(self.adjacency.sum(axis=1)).ravel().astype(np.int64)

    @property
    def revealed_mask(self) -> np.ndarray:
        return self.revealed != UNKNOWN_LABEL

    def edge_list(self) -> np.ndarray:
        """Return each undirected edge once as an (n_edges, 2) array with i < j."""
        upper = scipy.sparse.triu(self.adjacency, k=1, format="coo")
        order = np.lexsort((upper.col, upper.row))
        return np.column_stack((upper.row[order], upper.col[order])).astype(np.int64)
