"""KPSS stationarity test and KPSS-driven choice of differencing order.

The null hypothesis of the KPSS test is that the series is stationary
around a constant (level) or around a linear trend. Stationarity is
rejected when the statistic exceeds the asymptotic 5% critical value
from Kwiatkowski, Phillips, Schmidt and Shin (1992).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from itertools import accumulate
from typing import Sequence

__all__ = ["KpssRegression", "KpssResult", "kpss", "ndiffs"]

_PROBS = (0.01, 0.025, 0.05, 0.10)


class KpssRegression(Enum):
    """Deterministic component removed before the stationarity check."""

    CONSTANT = "c"
    """Stationarity around a constant; the usual choice for picking ``d``."""

    CONSTANT_TREND = "ct"
    """Stationarity around a linear trend."""

    @property
    def critical_values(self) -> tuple[float, float, float, float]:
        """Asymptotic critical values at 1%, 2.5%, 5% and 10%."""
        if self is KpssRegression.CONSTANT:
            return (0.739, 0.574, 0.463, 0.347)
        return (0.216, 0.176, 0.146, 0.119)


@dataclass(frozen=True)
class KpssResult:
    """Outcome of a KPSS test."""

    statistic: float
    """The KPSS statistic."""
    lag_used: int
    """Truncation lag of the Newey-West long-run variance."""
    critical_5pct: float
    """Asymptotic critical value at the 5% level."""
    p_value: float
    """Interpolated p-value, clamped to [0.01, 0.10]."""
    reject_stationarity: bool
    """True when ``statistic > critical_5pct``."""


def _residuals(y: Sequence[float], regression: KpssRegression) -> list[float]:
    n = len(y)
    if regression is KpssRegression.CONSTANT:
        mean = sum(y) / n
        return [v - mean for v in y]

    nf = float(n)
    sum_t = (n - 1) * nf / 2.0
    sum_t2 = (n - 1) * nf * (2.0 * (n - 1) + 1.0) / 6.0
    sum_y = sum(y)
    sum_ty = sum(t * v for t, v in enumerate(y))
    det = nf * sum_t2 - sum_t * sum_t
    a = (sum_t2 * sum_y - sum_t * sum_ty) / det
    b = (nf * sum_ty - sum_t * sum_y) / det
    return [v - a - b * t for t, v in enumerate(y)]


def _truncation_lag(n: int) -> int:
    """Schwert's rule, floor(12 * (n/100)^(1/4)), kept within [1, n-1]."""
    lag = max(int(math.floor(12.0 * (n / 100.0) ** 0.25)), 1)
    return min(lag, max(n - 1, 0))


def _long_run_variance(residuals: Sequence[float], lag: int) -> float:
    """Newey-West variance estimate with a Bartlett kernel."""
    n = len(residuals)
    s2 = sum(v * v for v in residuals) / n
    for k in range(1, lag + 1):
        acov = sum(a * b for a, b in zip(residuals[k:], residuals)) / n
        weight = 1.0 - k / (lag + 1)
        s2 += 2.0 * weight * acov
    return s2


def _safe_divide(numerator: float, denominator: float) -> float:
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _interp_p_value(statistic: float, crits: Sequence[float]) -> float:
    """Interpolate a p-value against the descending critical-value grid."""
    if statistic >= crits[0]:
        return 0.01
    if statistic <= crits[3]:
        return 0.10
    for (c_hi, p_lo), (c_lo, p_hi) in zip(
        zip(crits, _PROBS), zip(crits[1:], _PROBS[1:])
    ):
        if statistic >= c_lo:
            t = (c_hi - statistic) / (c_hi - c_lo)
            return p_lo + t * (p_hi - p_lo)
    return 0.10


def kpss(
    y: Sequence[float],
    regression: KpssRegression = KpssRegression.CONSTANT,
) -> KpssResult:
    """Run the KPSS test on ``y``.

    Raises ``ValueError`` when fewer than three observations are given.
    """
    values = [float(v) for v in y]
    n = len(values)
    if n < 3:
        raise ValueError(f"KPSS needs at least 3 observations, got {n}")

    residuals = _residuals(values, regression)
    s_sq = sum(s * s for s in accumulate(residuals))

    lag = _truncation_lag(n)
    s2 = _long_run_variance(residuals, lag)
    statistic = _safe_divide(s_sq, float(n) ** 2 * s2)

    crits = regression.critical_values
    critical_5pct = crits[2]
    return KpssResult(
        statistic=statistic,
        lag_used=lag,
        critical_5pct=critical_5pct,
        p_value=_interp_p_value(statistic, crits),
        reject_stationarity=statistic > critical_5pct,
    )


def ndiffs(y: Sequence[float], max_d: int = 2) -> int:
    """Number of ordinary differences needed for KPSS level stationarity.

    Differencing stops when the test no longer rejects, when fewer than
    eight observations remain, or when ``max_d`` is reached.
    """
    current = [float(v) for v in y]
    d = 0
    while d < max_d:
        if len(current) < 8:
            return d
        if not kpss(current, KpssRegression.CONSTANT).reject_stationarity:
            return d
        current = [b - a for a, b in zip(current, current[1:])]
        d += 1
    return d