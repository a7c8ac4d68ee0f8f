# uavflight/config.py
"""
Run configuration for a single flight analysis. Everything that used to be a
fixed filename or a hard-coded default is carried here and handed to each
stage explicitly.
"""
import numbers
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Union

from .constants import AnalysisConstants, OutputFiles
from .exceptions import InvalidParameterError


def validate_window(window) -> int:
    # bool is an int subclass but never a meaningful window
    if isinstance(window, bool) or not isinstance(window, numbers.Integral) or window < 0:
        raise InvalidParameterError('window', window, "Window must be a non-negative integer")
    return int(window)


def validate_threshold(threshold) -> float:
    if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real) or not threshold >= 0:
        raise InvalidParameterError('threshold', threshold, "Threshold must be a non-negative number")
    return float(threshold)


@dataclass
class AnalysisConfig:
    """Configuration parameters for one analysis run."""
    window: int = AnalysisConstants.DEFAULT_SMOOTHING_WINDOW
    threshold: float = AnalysisConstants.DEFAULT_ANOMALY_THRESHOLD
    output_dir: Union[str, Path] = Path('.')
    filenames: Dict[str, str] = field(default_factory=lambda: {
        'geopath': OutputFiles.GEOPATH_PLOT,
        'altitude': OutputFiles.ALTITUDE_PLOT,
        'battery': OutputFiles.BATTERY_PLOT,
        'velocity': OutputFiles.VELOCITY_PLOT,
        'report': OutputFiles.REPORT,
    })

    def __post_init__(self):
        """Reject bad parameters before any computation starts."""
        self.window = validate_window(self.window)
        self.threshold = validate_threshold(self.threshold)
        self.output_dir = Path(self.output_dir)

    def get_output_path(self, artifact: str) -> Path:
        return self.output_dir / self.filenames[artifact]
