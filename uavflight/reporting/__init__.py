"""
uavflight.reporting - Plot and text report exporters
"""

from .plotter import FlightPlotter
from .summary import format_summary, export_summary

__all__ = [
    'FlightPlotter',
    'format_summary',
    'export_summary',
]
