# uavflight/reporting/summary.py
"""
Plain-text flight summary report.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from ..analysis.data_models import AnomalySet, FlightStatistics
from ..constants import OutputFiles
from ..telemetry.data_models import TelemetrySequence

logger = logging.getLogger(__name__)

REPORT_TITLE = "UAV Flight Summary Report"


def format_summary(
    stats: FlightStatistics,
    anomalies: AnomalySet,
    sequence: Optional[TelemetrySequence] = None,
) -> str:
    """Build the report text. Every statistic field and every anomaly index is listed."""
    lines = [REPORT_TITLE, "=" * len(REPORT_TITLE)]
    for name, value in stats.to_dict().items():
        lines.append(f"{name}: {value}")

    lines.extend(["", f"Detected Velocity Anomalies: {len(anomalies)}"])
    if len(anomalies):
        lines.append("Anomaly Indices:")
        for index in anomalies:
            if sequence is not None:
                lines.append(f" - {index} ({sequence[index].timestamp.isoformat()})")
            else:
                lines.append(f" - {index}")
    return "\n".join(lines) + "\n"


def export_summary(
    stats: FlightStatistics,
    anomalies: AnomalySet,
    path: Union[str, Path] = OutputFiles.REPORT,
    sequence: Optional[TelemetrySequence] = None,
) -> Path:
    """Write the report to `path`. Filesystem errors propagate to the caller."""
    path = Path(path)
    text = format_summary(stats, anomalies, sequence)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)
    logger.info(f"Report saved to '{path}'")
    return path
