"""KPSS stationarity test and KPSS-driven choice of differencing order."""

__version__ = "0.1.0"
__all__ = ["kpss"]