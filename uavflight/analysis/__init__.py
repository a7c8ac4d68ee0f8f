"""
uavflight.analysis - Flight statistics, velocity smoothing and anomaly detection
"""

from .data_models import FlightStatistics, SmoothedSeries, AnomalySet
from .statistics import compute_stats
from .anomaly import smooth_velocity, detect_anomalies
from .utils.coordinates import distance_km

__all__ = [
    'FlightStatistics',
    'SmoothedSeries',
    'AnomalySet',
    'compute_stats',
    'smooth_velocity',
    'detect_anomalies',
    'distance_km',
]
