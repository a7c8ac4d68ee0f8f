# uavflight/cli.py
"""
Command-line entry point: analyse one telemetry CSV and write the plots and
summary report to an output directory.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import AnalysisConfig
from .constants import AnalysisConstants
from .core import FlightAnalyzer
from .exceptions import PipelineError, UAVFlightError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='uavflight',
        description="Analyse a UAV telemetry log: flight statistics, velocity anomalies, plots and a summary report.",
    )
    parser.add_argument('input', type=Path, help="Telemetry CSV (timestamp, latitude, longitude, altitude, velocity, battery)")
    parser.add_argument('-o', '--output-dir', type=Path, default=Path('.'),
                        help="Directory for plots and report (default: current directory)")
    parser.add_argument('--window', type=int, default=AnalysisConstants.DEFAULT_SMOOTHING_WINDOW,
                        help="Moving-average half-width in samples (default: %(default)s)")
    parser.add_argument('--threshold', type=float, default=AnalysisConstants.DEFAULT_ANOMALY_THRESHOLD,
                        help="Velocity deviation that counts as an anomaly (default: %(default)s)")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = AnalysisConfig(window=args.window, threshold=args.threshold, output_dir=args.output_dir)
    except UAVFlightError as e:
        logging.error(f"Invalid configuration: {e}")
        return 1

    logging.info(f"--- Analysing '{args.input}' ---")
    try:
        results = FlightAnalyzer(config).run(args.input)
    except PipelineError as e:
        logging.error(f"Analysis aborted. {e}")
        return 1

    for name, path in results.artifacts.items():
        logging.info(f"  > {name}: {path}")
    logging.info(f"Done. {len(results.anomalies)} velocity anomalies flagged.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
