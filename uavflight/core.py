# uavflight/core.py
"""
The orchestrator for a single-flight analysis. Stages run strictly in order,
each fully materialising its output before the next starts:

    load -> statistics -> smoothing -> anomaly detection -> plotting -> report

Any stage failure is re-raised as a PipelineError naming the stage, with the
original error chained.
"""
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, IO, Optional, Union

from .analysis.anomaly import detect_anomalies, smooth_velocity
from .analysis.data_models import AnomalySet, FlightStatistics, SmoothedSeries
from .analysis.statistics import compute_stats
from .config import AnalysisConfig
from .exceptions import PipelineError, UAVFlightError
from .reporting.plotter import FlightPlotter
from .reporting.summary import export_summary
from .telemetry.data_models import TelemetrySequence
from .telemetry.loader import TelemetryLoader

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResults:
    """Everything one run produced, plus where the artifacts were written."""
    sequence: TelemetrySequence
    statistics: FlightStatistics
    smoothed: SmoothedSeries
    anomalies: AnomalySet
    artifacts: Dict[str, Path] = field(default_factory=dict)


@contextmanager
def _stage(name: str):
    try:
        yield
    except (UAVFlightError, OSError) as e:
        logger.debug(f"Stage '{name}' raised {type(e).__name__}: {e}")
        raise PipelineError(name, f"{type(e).__name__}: {e}") from e


class FlightAnalyzer:
    """Main class to analyse one telemetry log and export its artifacts."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()
        self.loader = TelemetryLoader()
        self.plotter = FlightPlotter(self.config.output_dir)
        logger.debug(f"FlightAnalyzer initialized (window={self.config.window}, "
                     f"threshold={self.config.threshold}, output_dir='{self.config.output_dir}')")

    def analyze(self, source: Union[str, Path, IO[str]]) -> AnalysisResults:
        """Run the computation stages only; nothing is written."""
        with _stage('load'):
            sequence = self.loader.load(source)
        with _stage('statistics'):
            statistics = compute_stats(sequence)
        with _stage('smoothing'):
            smoothed = smooth_velocity(sequence, self.config.window)
        with _stage('anomaly detection'):
            anomalies = detect_anomalies(sequence, smoothed, self.config.threshold)
        return AnalysisResults(sequence=sequence, statistics=statistics,
                               smoothed=smoothed, anomalies=anomalies)

    def export(self, results: AnalysisResults) -> Dict[str, Path]:
        """Write plots and the report for already-computed results."""
        with _stage('output directory'):
            self.config.output_dir.mkdir(parents=True, exist_ok=True)
        with _stage('plotting'):
            artifacts = self.plotter.plot_all(results.sequence, results.smoothed,
                                              results.anomalies, self.config.filenames)
        with _stage('report'):
            artifacts['report'] = export_summary(results.statistics, results.anomalies,
                                                 self.config.get_output_path('report'),
                                                 sequence=results.sequence)
        results.artifacts = artifacts
        return artifacts

    def run(self, source: Union[str, Path, IO[str]]) -> AnalysisResults:
        """Analyse `source` and export every artifact."""
        results = self.analyze(source)
        self.export(results)
        logger.info(f"Analysis complete. {len(results.artifacts)} artifacts saved to '{self.config.output_dir}'.")
        return results
