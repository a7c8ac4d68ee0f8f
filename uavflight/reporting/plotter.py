# uavflight/reporting/plotter.py
"""
Renders the four flight plots to PNG files with matplotlib.
"""
import logging
from pathlib import Path
from typing import Dict, Optional, Union

import matplotlib
matplotlib.use('Agg')  # file output only, no display
import matplotlib.pyplot as plt

from ..analysis.data_models import AnomalySet, SmoothedSeries
from ..constants import OutputFiles
from ..exceptions import DimensionMismatchError
from ..telemetry.data_models import TelemetrySequence

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FlightPlotter:
    """Writes geospatial path, altitude, battery and velocity plots for one flight."""

    def __init__(self, output_dir: PathLike = '.', figsize=(10, 6), dpi: int = 100):
        self.output_dir = Path(output_dir)
        self.figsize = figsize
        self.dpi = dpi

    def plot_geopath(self, sequence: TelemetrySequence, filename: str = OutputFiles.GEOPATH_PLOT) -> Path:
        """Longitude vs latitude track."""
        fig, ax = plt.subplots(figsize=self.figsize)
        ax.plot(sequence.longitudes, sequence.latitudes, 'b-', linewidth=1.5)
        ax.set_title("Geospatial Flight Path")
        ax.set_xlabel("Longitude"); ax.set_ylabel("Latitude")
        ax.grid(True)
        return self._save(fig, filename)

    def plot_altitude(self, sequence: TelemetrySequence, filename: str = OutputFiles.ALTITUDE_PLOT) -> Path:
        fig, ax = plt.subplots(figsize=self.figsize)
        ax.plot(sequence.timestamps, sequence.altitudes, 'm-', label='Altitude (m)')
        ax.set_title("Altitude Over Time")
        ax.set_xlabel("Time"); ax.set_ylabel("Altitude (m)")
        ax.legend(loc='lower right'); ax.grid(True)
        fig.autofmt_xdate()
        return self._save(fig, filename)

    def plot_battery(self, sequence: TelemetrySequence, filename: str = OutputFiles.BATTERY_PLOT) -> Path:
        fig, ax = plt.subplots(figsize=self.figsize)
        ax.plot(sequence.timestamps, sequence.batteries, 'g-', label='Battery (%)')
        ax.set_title("Battery Drain Over Time")
        ax.set_xlabel("Time"); ax.set_ylabel("Battery (%)")
        ax.legend(loc='lower right'); ax.grid(True)
        fig.autofmt_xdate()
        return self._save(fig, filename)

    def plot_velocity(
        self,
        sequence: TelemetrySequence,
        smoothed: SmoothedSeries,
        anomalies: AnomalySet,
        filename: str = OutputFiles.VELOCITY_PLOT,
    ) -> Path:
        """Raw and smoothed velocity with anomalous samples highlighted in red."""
        if len(smoothed) != len(sequence):
            raise DimensionMismatchError(len(sequence), len(smoothed), "Cannot plot smoothed velocity")

        timestamps = sequence.timestamps
        velocities = sequence.velocities
        flagged = list(anomalies)

        fig, ax = plt.subplots(figsize=self.figsize)
        ax.plot(timestamps, velocities, label='Raw Velocity', linewidth=1.5)
        ax.plot(timestamps, smoothed.values, label='Smoothed', linewidth=2)
        ax.scatter([timestamps[i] for i in flagged], velocities[flagged],
                   color='red', label='Anomalies', zorder=10)
        ax.set_title("Velocity with Anomaly Detection")
        ax.set_xlabel("Time"); ax.set_ylabel("Velocity (m/s)")
        ax.legend(); ax.grid(True)
        fig.autofmt_xdate()
        return self._save(fig, filename)

    def plot_all(
        self,
        sequence: TelemetrySequence,
        smoothed: SmoothedSeries,
        anomalies: AnomalySet,
        filenames: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Path]:
        """Render every plot; returns artifact name -> written path."""
        filenames = filenames or {}
        return {
            'geopath': self.plot_geopath(sequence, filenames.get('geopath', OutputFiles.GEOPATH_PLOT)),
            'altitude': self.plot_altitude(sequence, filenames.get('altitude', OutputFiles.ALTITUDE_PLOT)),
            'battery': self.plot_battery(sequence, filenames.get('battery', OutputFiles.BATTERY_PLOT)),
            'velocity': self.plot_velocity(sequence, smoothed, anomalies,
                                           filenames.get('velocity', OutputFiles.VELOCITY_PLOT)),
        }

    def _save(self, fig, filename: str) -> Path:
        path = self.output_dir / filename
        try:
            fig.tight_layout()
            fig.savefig(path, dpi=self.dpi)
        finally:
            plt.close(fig)
        logger.info(f"Plot saved to '{path}'")
        return path
