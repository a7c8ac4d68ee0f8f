# uavflight/telemetry/data_models.py
"""
Core telemetry structures. A TelemetrySequence is the single source of truth
for a flight; every derived structure is computed from it and it is never
mutated after load.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Tuple

import numpy as np


@dataclass(frozen=True)
class TelemetrySample:
    """One timestamped UAV sensor reading."""
    timestamp: datetime
    latitude: float
    longitude: float
    altitude: float
    velocity: float
    battery: float


@dataclass(frozen=True)
class TelemetrySequence:
    """Samples in load order. Ordering is the caller's responsibility; nothing here re-sorts."""
    samples: Tuple[TelemetrySample, ...]

    def __post_init__(self):
        object.__setattr__(self, 'samples', tuple(self.samples))

    def __len__(self) -> int:
        return len(self.samples)

    def __getitem__(self, index):
        return self.samples[index]

    def __iter__(self) -> Iterator[TelemetrySample]:
        return iter(self.samples)

    def _column(self, name: str) -> np.ndarray:
        return np.array([getattr(s, name) for s in self.samples], dtype=float)

    @property
    def timestamps(self) -> list:
        return [s.timestamp for s in self.samples]

    @property
    def latitudes(self) -> np.ndarray:
        return self._column('latitude')

    @property
    def longitudes(self) -> np.ndarray:
        return self._column('longitude')

    @property
    def altitudes(self) -> np.ndarray:
        return self._column('altitude')

    @property
    def velocities(self) -> np.ndarray:
        return self._column('velocity')

    @property
    def batteries(self) -> np.ndarray:
        return self._column('battery')
