# uavflight/tests/factories.py
"""Helpers for building in-memory telemetry in tests."""
from datetime import datetime, timedelta

from uavflight.telemetry.data_models import TelemetrySample, TelemetrySequence

START_TIME = datetime(2024, 5, 12, 9, 0, 0)

CSV_HEADER = "timestamp,latitude,longitude,altitude,velocity,battery\n"


def make_sequence(velocities=None, coords=None, altitudes=None, batteries=None, step_s=1.0):
    """Build a sequence; any column left out is filled with harmless defaults."""
    n = len(next(c for c in (velocities, coords, altitudes, batteries) if c is not None))
    velocities = velocities if velocities is not None else [10.0] * n
    coords = coords if coords is not None else [(0.0, 0.0)] * n
    altitudes = altitudes if altitudes is not None else [100.0] * n
    batteries = batteries if batteries is not None else [100.0 - i for i in range(n)]
    samples = [
        TelemetrySample(
            timestamp=START_TIME + timedelta(seconds=i * step_s),
            latitude=lat, longitude=lon,
            altitude=float(alt), velocity=float(vel), battery=float(bat),
        )
        for i, ((lat, lon), alt, vel, bat) in enumerate(zip(coords, altitudes, velocities, batteries))
    ]
    return TelemetrySequence(tuple(samples))


def make_csv(rows, header=CSV_HEADER):
    """Join row strings under a header into CSV text."""
    return header + "".join(row + "\n" for row in rows)
