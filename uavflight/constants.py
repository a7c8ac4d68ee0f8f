# uavflight/constants.py
"""
Shared constants for telemetry loading, analysis and artifact export.
"""


class TelemetryColumns:
    """Column names the loader requires (case-sensitive)."""
    TIMESTAMP = 'timestamp'
    LATITUDE = 'latitude'
    LONGITUDE = 'longitude'
    ALTITUDE = 'altitude'
    VELOCITY = 'velocity'
    BATTERY = 'battery'

    REQUIRED = (TIMESTAMP, LATITUDE, LONGITUDE, ALTITUDE, VELOCITY, BATTERY)
    NUMERIC = (LATITUDE, LONGITUDE, ALTITUDE, VELOCITY, BATTERY)


class AnalysisConstants:
    EARTH_RADIUS_KM: float = 6371.0

    # Smoothing / anomaly defaults
    DEFAULT_SMOOTHING_WINDOW: int = 5
    DEFAULT_ANOMALY_THRESHOLD: float = 10.0

    # Stats engine needs a pair of samples for distance and duration
    MIN_SAMPLES_FOR_STATS: int = 2


class OutputFiles:
    """Default artifact filenames, relative to the output directory."""
    GEOPATH_PLOT = 'geopath.png'
    ALTITUDE_PLOT = 'altitude_plot.png'
    BATTERY_PLOT = 'battery_plot.png'
    VELOCITY_PLOT = 'velocity_plot.png'
    REPORT = 'uav_flight_report.txt'
