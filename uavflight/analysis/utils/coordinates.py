# uavflight/analysis/utils/coordinates.py
"""
Great-circle geometry on a spherical Earth. Logging is omitted here as these
are high-frequency, low-level functions.
"""
import numpy as np

from ...constants import AnalysisConstants


def distance_km(lat1, lon1, lat2, lon2):
    """
    Haversine distance in kilometres between two points given in decimal degrees.

    No range validation is done. Accepts scalars or equally-shaped numpy
    arrays, in which case the distances are computed element-wise.
    """
    lat1_rad, lat2_rad = np.radians(lat1), np.radians(lat2)
    d_lat = np.radians(np.subtract(lat2, lat1))
    d_lon = np.radians(np.subtract(lon2, lon1))
    a = np.sin(d_lat / 2)**2 + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(d_lon / 2)**2
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return AnalysisConstants.EARTH_RADIUS_KM * c
