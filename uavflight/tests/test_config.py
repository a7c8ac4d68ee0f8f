#!/usr/bin/env python3
# uavflight/tests/test_config.py

import sys
from pathlib import Path
import unittest

import numpy as np

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent
sys.path.append(str(project_root))

from uavflight.config import AnalysisConfig
from uavflight.exceptions import InvalidParameterError


class TestAnalysisConfig(unittest.TestCase):
    def test_defaults(self):
        config = AnalysisConfig()
        self.assertEqual(config.window, 5)
        self.assertEqual(config.threshold, 10.0)
        self.assertEqual(config.output_dir, Path('.'))
        self.assertEqual(config.get_output_path('report'), Path('uav_flight_report.txt'))

    def test_output_dir_coerced_to_path(self):
        config = AnalysisConfig(output_dir='out/flight1')
        self.assertEqual(config.get_output_path('geopath'), Path('out/flight1/geopath.png'))

    def test_numpy_scalars_accepted(self):
        config = AnalysisConfig(window=np.int64(3), threshold=np.float64(2.5))
        self.assertEqual(config.window, 3)
        self.assertIsInstance(config.window, int)
        self.assertEqual(config.threshold, 2.5)

    def test_invalid_window(self):
        for window in (-1, 2.0, True, '3'):
            with self.assertRaises(InvalidParameterError, msg=f"window={window!r}"):
                AnalysisConfig(window=window)

    def test_invalid_threshold(self):
        for threshold in (-5, -0.001, float('nan'), None):
            with self.assertRaises(InvalidParameterError, msg=f"threshold={threshold!r}"):
                AnalysisConfig(threshold=threshold)

    def test_filename_dicts_not_shared(self):
        a, b = AnalysisConfig(), AnalysisConfig()
        a.filenames['report'] = 'other.txt'
        self.assertEqual(b.filenames['report'], 'uav_flight_report.txt')


if __name__ == '__main__':
    unittest.main()
