"""Edge affinities of the two-community contextual SBM.

The intra/inter community rates are ``c_in = d + lam * sqrt(d)`` and
``c_out = d - lam * sqrt(d)``, so that ``(c_in + c_out) / 2 = d`` and the
expected average degree equals ``d``. Per-pair probabilities are the rates
divided by ``N``.
"""

import math
import sys

# Relative slack for rates and probabilities that should land exactly on a
# boundary but miss it by rounding (e.g. lam = sqrt(d) gives c_out ~ -4e-16).
_BOUNDARY_TOL = 8 * sys.float_info.epsilon


class DegenerateAffinityError(ValueError):
    """Raised when an edge probability falls outside [0, 1]."""


def community_rates(d: float, lam: float) -> tuple[float, float]:
    """Unnormalized intra/inter community rates ``(c_in, c_out)``.

    A rate within rounding distance of zero is returned as exactly 0.0.
    """
    shift = lam * math.sqrt(d)
    c_in, c_out = d + shift, d - shift
    slack = _BOUNDARY_TOL * d
    if abs(c_in) <= slack:
        c_in = 0.0
    if abs(c_out) <= slack:
        c_out = 0.0
    return c_in, c_out


def resolve_affinities(N: int, d: float, lam: float) -> tuple[float, float]:
    """Map ``(N, d, lam)`` to per-pair edge probabilities ``(p_in, p_out)``.

    Out-of-range probabilities are rejected rather than clipped: clipping
    would silently change both the average degree and the SNR. Values that
    miss 0 or 1 only by floating-point rounding are snapped onto the
    boundary, so ``lam = sqrt(d)`` yields ``p_out == 0.0`` exactly.

    Args:
        N: Number of nodes.
        d: Target average degree.
        lam: Community SNR. 0 gives an Erdos-Renyi graph, negative values a
            disassortative one.

    Returns:
        Tuple ``(p_in, p_out)``, both in [0, 1].

    Raises:
        DegenerateAffinityError: If either probability lies outside [0, 1].
    """
    c_in, c_out = community_rates(d, lam)
    p_in = _snap_to_one(c_in / N)
    p_out = _snap_to_one(c_out / N)
    check_probability("p_in", p_in, N=N, d=d, lam=lam)
    check_probability("p_out", p_out, N=N, d=d, lam=lam)
    return p_in, p_out


def _snap_to_one(p: float) -> float:
    return 1.0 if abs(p - 1.0) <= _BOUNDARY_TOL else p


def check_probability(name: str, p: float, **context: float) -> None:
    """Raise DegenerateAffinityError unless ``0 <= p <= 1``."""
    if not 0.0 <= p <= 1.0:
        details = ", ".join(f"{k}={v}" for k, v in context.items())
        suffix = f" ({details})" if details else ""
        raise DegenerateAffinityError(
            f"{name}={p:.6g} lies outside [0, 1]{suffix}"
        )
