"""
uavflight - Offline analysis of UAV flight telemetry logs.

Loads a telemetry CSV, computes flight statistics, smooths the velocity
signal, flags velocity anomalies and exports plots plus a text report.
"""

from .config import AnalysisConfig
from .core import FlightAnalyzer, AnalysisResults
from .exceptions import (
    UAVFlightError,
    ParseError,
    InsufficientDataError,
    InvalidParameterError,
    DimensionMismatchError,
    PipelineError,
)

__all__ = [
    'AnalysisConfig',
    'FlightAnalyzer',
    'AnalysisResults',
    'UAVFlightError',
    'ParseError',
    'InsufficientDataError',
    'InvalidParameterError',
    'DimensionMismatchError',
    'PipelineError',
]
