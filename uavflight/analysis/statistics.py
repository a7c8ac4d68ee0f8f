# uavflight/analysis/statistics.py
"""
Stats engine: reduces a TelemetrySequence to FlightStatistics.
"""
import logging

import numpy as np

from ..constants import AnalysisConstants
from ..exceptions import InsufficientDataError
from ..telemetry.data_models import TelemetrySequence
from .data_models import FlightStatistics
from .utils.coordinates import distance_km

logger = logging.getLogger(__name__)


def calculate_path_distance(sequence: TelemetrySequence) -> float:
    """Total distance in km, summed over consecutive sample pairs in the given order."""
    lats, lons = sequence.latitudes, sequence.longitudes
    if len(lats) < 2:
        return 0.0
    return float(np.sum(distance_km(lats[:-1], lons[:-1], lats[1:], lons[1:])))


def compute_stats(sequence: TelemetrySequence) -> FlightStatistics:
    """
    Compute aggregate flight statistics.

    Flight time is last timestamp minus first; the sequence is assumed to be
    time-ordered already and is not sorted.

    Raises:
        InsufficientDataError: fewer than two samples.
    """
    required = AnalysisConstants.MIN_SAMPLES_FOR_STATS
    if len(sequence) < required:
        raise InsufficientDataError(required, len(sequence), "Flight statistics need a pair of samples")

    altitudes = sequence.altitudes
    stats = FlightStatistics(
        total_flight_time=sequence[-1].timestamp - sequence[0].timestamp,
        total_distance_km=calculate_path_distance(sequence),
        avg_altitude=float(np.mean(altitudes)),
        max_altitude=float(np.max(altitudes)),
        min_battery=float(np.min(sequence.batteries)),
        sample_count=len(sequence),
    )
    logger.info(
        f"Flight statistics: {stats.total_distance_km:.3f} km over {stats.total_flight_time}, "
        f"max altitude {stats.max_altitude:.1f} m, min battery {stats.min_battery:.1f}%"
    )
    return stats
