#!/usr/bin/env python3
# uavflight/tests/test_core.py

import sys
import io
import tempfile
from pathlib import Path
import unittest
from unittest.mock import patch

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent
sys.path.append(str(project_root))

from uavflight.config import AnalysisConfig
from uavflight.core import FlightAnalyzer
from uavflight.exceptions import (
    PipelineError, ParseError, InsufficientDataError, DimensionMismatchError,
)
from uavflight.tests.factories import make_csv

SPIKE_ROWS = [
    f"2024-05-12T09:00:{i:02d},0.0,{i * 0.001:.3f},{100 + i},{v},{100 - i}"
    for i, v in enumerate([0, 0, 0, 100, 0, 0, 0])
]


class TestFlightAnalyzer(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.output_dir = Path(self.tmp.name) / "out"
        self.config = AnalysisConfig(window=1, threshold=10, output_dir=self.output_dir)

    def tearDown(self):
        self.tmp.cleanup()

    def test_analyze_computes_every_stage(self):
        results = FlightAnalyzer(self.config).analyze(io.StringIO(make_csv(SPIKE_ROWS)))
        self.assertEqual(len(results.sequence), 7)
        self.assertEqual(results.statistics.sample_count, 7)
        self.assertEqual(results.statistics.max_altitude, 106.0)
        self.assertEqual(results.smoothed.window, 1)
        self.assertEqual(results.anomalies.indices, (2, 3, 4))
        self.assertEqual(results.artifacts, {})
        self.assertFalse(self.output_dir.exists())

    def test_run_writes_all_artifacts(self):
        results = FlightAnalyzer(self.config).run(io.StringIO(make_csv(SPIKE_ROWS)))
        expected = {'geopath.png', 'altitude_plot.png', 'battery_plot.png',
                    'velocity_plot.png', 'uav_flight_report.txt'}
        self.assertEqual({p.name for p in results.artifacts.values()}, expected)
        self.assertEqual({p.name for p in self.output_dir.iterdir()}, expected)
        report = (self.output_dir / 'uav_flight_report.txt').read_text(encoding='utf-8')
        self.assertIn("Detected Velocity Anomalies: 3", report)

    def test_load_failure_names_stage(self):
        with self.assertRaises(PipelineError) as ctx:
            FlightAnalyzer(self.config).run(io.StringIO("timestamp,latitude\n2024-05-12T09:00:00,1.0\n"))
        self.assertEqual(ctx.exception.stage, 'load')
        self.assertIsInstance(ctx.exception.__cause__, ParseError)
        self.assertIn("Stage 'load' failed", str(ctx.exception))

    def test_missing_file_is_load_failure(self):
        with self.assertRaises(PipelineError) as ctx:
            FlightAnalyzer(self.config).run(Path(self.tmp.name) / "absent.csv")
        self.assertEqual(ctx.exception.stage, 'load')
        self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)

    def test_single_sample_aborts_before_export(self):
        with self.assertRaises(PipelineError) as ctx:
            FlightAnalyzer(self.config).run(io.StringIO(make_csv(SPIKE_ROWS[:1])))
        self.assertEqual(ctx.exception.stage, 'statistics')
        self.assertIsInstance(ctx.exception.__cause__, InsufficientDataError)
        self.assertFalse(self.output_dir.exists())

    def test_anomaly_stage_failure_names_stage(self):
        with patch('uavflight.core.detect_anomalies', side_effect=DimensionMismatchError(7, 6)):
            with self.assertRaises(PipelineError) as ctx:
                FlightAnalyzer(self.config).analyze(io.StringIO(make_csv(SPIKE_ROWS)))
        self.assertEqual(ctx.exception.stage, 'anomaly detection')

    def test_unwritable_output_surfaces_as_pipeline_error(self):
        blocker = Path(self.tmp.name) / "blocker"
        blocker.write_text("not a directory")
        config = AnalysisConfig(window=1, threshold=10, output_dir=blocker / "out")
        with self.assertRaises(PipelineError) as ctx:
            FlightAnalyzer(config).run(io.StringIO(make_csv(SPIKE_ROWS)))
        self.assertEqual(ctx.exception.stage, 'output directory')
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_unexpected_errors_are_not_wrapped(self):
        with patch('uavflight.core.compute_stats', side_effect=RuntimeError("boom")):
            with self.assertRaises(RuntimeError):
                FlightAnalyzer(self.config).analyze(io.StringIO(make_csv(SPIKE_ROWS)))


if __name__ == '__main__':
    unittest.main()
