"""
uavflight.telemetry - Loading and holding raw UAV telemetry
"""

from .data_models import TelemetrySample, TelemetrySequence
from .loader import TelemetryLoader, load

__all__ = [
    'TelemetrySample',
    'TelemetrySequence',
    'TelemetryLoader',
    'load',
]
