import math

import pytest

from stationarity.kpss import KpssRegression, KpssResult, kpss, ndiffs

_MASK = (1 << 64) - 1
_U64_MAX = float(_MASK)


def _xorshift(state):
    state ^= (state << 13) & _MASK
    state ^= state >> 7
    state ^= (state << 17) & _MASK
    return state


def _normals(count, seed=1):
    state = seed
    out = []
    for _ in range(count):
        state = _xorshift(state)
        u1 = max(state / _U64_MAX, 1e-300)
        state = _xorshift(state)
        u2 = state / _U64_MAX
        out.append(math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2))
    return out


def _random_walk(n=500):
    eps = _normals(n - 1)
    return [0.0, *__import_accumulate()(eps)]


def __import_accumulate():
    from itertools import accumulate

    return accumulate


def _white_noise(n=500):
    return [5.0 + e for e in _normals(n)]


def test_kpss_flags_random_walk():
    r = kpss(_random_walk(), KpssRegression.CONSTANT)
    assert r.reject_stationarity
    assert r.statistic > r.critical_5pct


def test_kpss_accepts_white_noise():
    r = kpss(_white_noise(), KpssRegression.CONSTANT)
    assert not r.reject_stationarity
    assert r.statistic <= r.critical_5pct


def test_ndiffs_random_walk_returns_one():
    assert ndiffs(_random_walk(), 2) == 1


def test_ndiffs_white_noise_returns_zero():
    assert ndiffs(_white_noise(), 2) == 0


def test_ndiffs_respects_zero_cap():
    assert ndiffs(_random_walk(), 0) == 0


def test_ndiffs_short_series_returns_zero():
    assert ndiffs([1.0, 5.0, 2.0, 8.0, 3.0, 9.0, 4.0], 2) == 0


@pytest.mark.parametrize(
    "regression, expected",
    [(KpssRegression.CONSTANT, 0.463), (KpssRegression.CONSTANT_TREND, 0.146)],
)
def test_critical_value_at_five_percent(regression, expected):
    r = kpss(_white_noise(), regression)
    assert r.critical_5pct == expected


@pytest.mark.parametrize("n, lag", [(500, 17), (100, 12), (3, 2)])
def test_lag_from_schwert_rule(n, lag):
    assert kpss(_white_noise(n)).lag_used == lag


def test_rejection_agrees_with_p_value():
    series = [_random_walk(), _white_noise(), _white_noise(60), _random_walk(80)]
    for y in series:
        for regression in KpssRegression:
            r = kpss(y, regression)
            assert 0.01 <= r.p_value <= 0.10
            assert r.reject_stationarity == (r.p_value < 0.05)


def test_random_walk_p_value_at_floor():
    assert kpss(_random_walk()).p_value == pytest.approx(0.01)


def test_deterministic_trend_rejects_level_stationarity():
    noise = _normals(500)
    y = [0.05 * t + e for t, e in enumerate(noise)]
    assert kpss(y, KpssRegression.CONSTANT).reject_stationarity


def test_constant_series_is_not_rejected():
    r = kpss([4.0] * 20)
    assert math.isnan(r.statistic)
    assert r.p_value == 0.10
    assert r.reject_stationarity is False
    assert ndiffs([4.0] * 20, 2) == 0


def test_result_is_kpss_result_with_expected_fields():
    r = kpss([1.0, 3.0, 2.0, 5.0, 4.0])
    assert isinstance(r, KpssResult)
    assert r.lag_used == 4


def test_too_short_raises():
    with pytest.raises(ValueError):
        kpss([1.0, 2.0])