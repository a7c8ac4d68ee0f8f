# uavflight/analysis/anomaly.py
"""
Velocity smoothing and deviation-based anomaly detection.

The smoother is a centered moving average whose window shrinks at the ends of
the flight instead of padding or wrapping, so samples near the start and end
are averaged over fewer neighbours. Anomalies are indices where the raw
velocity differs from its smoothed value by strictly more than a threshold.
"""
import logging
from typing import Union

import numpy as np

from ..config import validate_threshold, validate_window
from ..exceptions import DimensionMismatchError
from ..telemetry.data_models import TelemetrySequence
from .data_models import AnomalySet, SmoothedSeries

logger = logging.getLogger(__name__)


def moving_average(values: np.ndarray, window: int) -> np.ndarray:
    """Mean of values[max(i - window, 0) : min(i + window, n - 1) + 1] for each i."""
    values = np.asarray(values, dtype=float)
    n = len(values)
    idx = np.arange(n)
    lo = np.maximum(idx - window, 0)
    hi = np.minimum(idx + window, n - 1)
    # prefix[k] is the sum of values[:k]
    prefix = np.concatenate(([0.0], np.cumsum(values)))
    return (prefix[hi + 1] - prefix[lo]) / (hi - lo + 1)


def smooth_velocity(sequence: TelemetrySequence, window: int) -> SmoothedSeries:
    """
    Smooth the raw velocity signal of `sequence`.

    Args:
        window: Half-width of the averaging neighbourhood; 0 returns the raw series.

    Raises:
        InvalidParameterError: window is negative or not an integer.
    """
    window = validate_window(window)
    raw = sequence.velocities
    values = raw.copy() if window == 0 else moving_average(raw, window)
    logger.debug(f"Smoothed {len(values)} velocity samples with window={window}")
    return SmoothedSeries(values=values, window=window)


def detect_anomalies(
    sequence: TelemetrySequence,
    smoothed: Union[SmoothedSeries, np.ndarray],
    threshold: float,
) -> AnomalySet:
    """
    Flag indices where abs(raw - smoothed) > threshold.

    Raises:
        InvalidParameterError: threshold is negative.
        DimensionMismatchError: `smoothed` was not computed from a sequence of this length.
    """
    threshold = validate_threshold(threshold)
    smoothed_values = smoothed.values if isinstance(smoothed, SmoothedSeries) else np.asarray(smoothed, dtype=float)
    raw = sequence.velocities
    if len(smoothed_values) != len(raw):
        raise DimensionMismatchError(len(raw), len(smoothed_values), "Smoothed series does not match telemetry")

    deviation = np.abs(raw - smoothed_values)
    indices = np.flatnonzero(deviation > threshold)
    logger.info(f"Detected {len(indices)} velocity anomalies (threshold={threshold})")
    return AnomalySet(indices=tuple(indices.tolist()), threshold=threshold)
