# stationarity

A small, dependency-free library for deciding whether a time series needs
differencing before it is modelled, for example with ARIMA.

Everything lives in the `stationarity.kpss` module:

- `kpss(y, regression=KpssRegression.CONSTANT)` runs the
  Kwiatkowski–Phillips–Schmidt–Shin test. The null hypothesis is that the
  series is stationary. A rejection means the series should be differenced.
- `ndiffs(y, max_d=2)` picks the ordinary differencing order `d`. It runs
  KPSS on the series, and while the test rejects it takes first
  differences and tests again, up to `max_d` times.

## Installation

```
pip install .
```

## Usage

```python
from stationarity.kpss import KpssRegression, kpss, ndiffs

series = [0.0, 0.5, 0.3, 0.8, 0.4, 1.1, 0.6, 1.3, 0.9, 1.5, 1.2, 1.7]

result = kpss(series, KpssRegression.CONSTANT)
print(result.statistic, result.p_value, result.reject_stationarity)

d = ndiffs(series, 2)
```

### Regression choice

`KpssRegression` selects the deterministic part removed before testing:

- `KpssRegression.CONSTANT`: stationarity around a constant level (the
  series minus its mean). This is the default and the usual choice when
  selecting `d`.
- `KpssRegression.CONSTANT_TREND`: stationarity around a linear trend
  fitted by least squares.

Each member's `critical_values` property gives the asymptotic critical
values at the 1 %, 2.5 %, 5 % and 10 % levels from the original KPSS
paper: `(0.739, 0.574, 0.463, 0.347)` for `CONSTANT` and
`(0.216, 0.176, 0.146, 0.119)` for `CONSTANT_TREND`.

### The result

`kpss` returns a frozen `KpssResult` dataclass with these fields:

| field                 | meaning                                                        |
|-----------------------|----------------------------------------------------------------|
| `statistic`           | the KPSS statistic                                             |
| `lag_used`            | Newey–West (Bartlett kernel) truncation lag, `floor(12·(n/100)^¼)`, kept between 1 and `n - 1` |
| `critical_5pct`       | asymptotic critical value at the 5 % level                     |
| `p_value`             | p-value interpolated linearly from the 1 %, 2.5 %, 5 % and 10 % critical values, limited to [0.01, 0.10] |
| `reject_stationarity` | `True` when `statistic > critical_5pct`                        |

A p-value of `0.10` means "0.10 or more". A p-value of `0.01` means
"0.01 or less".

`kpss` raises `ValueError` when given fewer than 3 observations. For a
series whose long-run variance is zero (a constant series, for example)
the statistic is `nan`, and stationarity is not rejected.

`ndiffs` stops early and returns the current order when the series being
tested has fewer than 8 observations.

## What this package does not do

It only chooses ordinary differencing. There is no seasonal-strength
measure and no selection of a seasonal differencing order, and it does not
fit or forecast any model.

## Running the tests

```
pip install .[test]
pytest
```