# uavflight/telemetry/loader.py
"""
Reads a tabular telemetry log into a validated TelemetrySequence.

Policy is strict-fail: a single malformed row aborts the whole load with a
ParseError naming the column and the 1-based data row. Nothing is skipped.
"""
import logging
from typing import IO, Union
from pathlib import Path

import pandas as pd

from ..constants import TelemetryColumns
from ..exceptions import ParseError
from .data_models import TelemetrySample, TelemetrySequence

logger = logging.getLogger(__name__)


class TelemetryLoader:
    """Loads UAV telemetry from CSV files or text streams."""

    def __init__(self, required_columns=TelemetryColumns.REQUIRED):
        self.required_columns = tuple(required_columns)

    def load(self, source: Union[str, Path, IO[str]]) -> TelemetrySequence:
        """Parse `source` into a TelemetrySequence, one sample per row, in file order."""
        frame = self._read_frame(source)
        self._check_columns(frame)

        timestamps = self._parse_timestamps(frame[TelemetryColumns.TIMESTAMP])
        numeric = {col: self._parse_numeric(frame[col], col) for col in TelemetryColumns.NUMERIC}

        samples = [
            TelemetrySample(
                timestamp=ts.to_pydatetime(),
                latitude=float(lat),
                longitude=float(lon),
                altitude=float(alt),
                velocity=float(vel),
                battery=float(bat),
            )
            for ts, lat, lon, alt, vel, bat in zip(
                timestamps,
                numeric[TelemetryColumns.LATITUDE],
                numeric[TelemetryColumns.LONGITUDE],
                numeric[TelemetryColumns.ALTITUDE],
                numeric[TelemetryColumns.VELOCITY],
                numeric[TelemetryColumns.BATTERY],
            )
        ]
        logger.info(f"Loaded {len(samples)} telemetry samples from {self._describe(source)}")
        return TelemetrySequence(tuple(samples))

    def _read_frame(self, source) -> pd.DataFrame:
        # Everything comes in as text so coercion below decides what is malformed
        try:
            return pd.read_csv(source, dtype=str, keep_default_na=False, skipinitialspace=True)
        except pd.errors.EmptyDataError as e:
            raise ParseError("Telemetry input is empty") from e
        except pd.errors.ParserError as e:
            raise ParseError(f"Telemetry input is not valid CSV: {e}") from e
        except UnicodeDecodeError as e:
            raise ParseError(f"Telemetry input is not valid UTF-8 text: {e}") from e

    def _check_columns(self, frame: pd.DataFrame) -> None:
        missing = [col for col in self.required_columns if col not in frame.columns]
        if missing:
            raise ParseError(f"Missing required column(s): {', '.join(missing)}", column=missing[0])

    def _parse_timestamps(self, column: pd.Series) -> pd.Series:
        try:
            parsed = pd.to_datetime(column.str.strip(), format='ISO8601', errors='coerce')
        except (ValueError, TypeError) as e:
            # e.g. mixed UTC offsets that cannot share one column dtype
            raise ParseError(f"Inconsistent timestamps: {e}", column=TelemetryColumns.TIMESTAMP) from e
        self._raise_on_invalid(column, parsed, TelemetryColumns.TIMESTAMP, "Unparseable timestamp")
        return parsed

    def _parse_numeric(self, column: pd.Series, name: str) -> pd.Series:
        parsed = pd.to_numeric(column.str.strip(), errors='coerce')
        self._raise_on_invalid(column, parsed, name, "Unparseable numeric value")
        return parsed

    @staticmethod
    def _raise_on_invalid(raw: pd.Series, parsed: pd.Series, name: str, message: str) -> None:
        invalid = parsed.isna()
        if invalid.any():
            position = int(invalid.to_numpy().nonzero()[0][0])
            raise ParseError(f"{message} {raw.iloc[position]!r}", column=name, row=position + 1)

    @staticmethod
    def _describe(source) -> str:
        return str(source) if isinstance(source, (str, Path)) else type(source).__name__


def load(source: Union[str, Path, IO[str]]) -> TelemetrySequence:
    """Module-level convenience wrapper around TelemetryLoader."""
    return TelemetryLoader().load(source)
