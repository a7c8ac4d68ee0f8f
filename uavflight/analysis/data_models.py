# uavflight/analysis/data_models.py
"""
Derived value objects produced by the analysis stages. All are computed from
a TelemetrySequence and are read-only once built.
"""
from dataclasses import dataclass, asdict
from datetime import timedelta
from typing import Dict, Iterator, Tuple

import numpy as np


@dataclass(frozen=True)
class FlightStatistics:
    """Aggregate statistics for one flight."""
    total_flight_time: timedelta
    total_distance_km: float
    avg_altitude: float
    max_altitude: float
    min_battery: float
    sample_count: int = 0

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class SmoothedSeries:
    """Windowed velocity means, index-aligned with the source sequence."""
    values: np.ndarray
    window: int

    def __post_init__(self):
        values = np.array(self.values, dtype=float)
        values.setflags(write=False)
        object.__setattr__(self, 'values', values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]


@dataclass(frozen=True)
class AnomalySet:
    """Sorted sequence indices whose raw velocity strays from the smoothed value."""
    indices: Tuple[int, ...]
    threshold: float

    def __post_init__(self):
        object.__setattr__(self, 'indices', tuple(sorted(int(i) for i in self.indices)))

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __contains__(self, index) -> bool:
        return index in self.indices
