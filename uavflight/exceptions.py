# uavflight/exceptions.py
"""
Flight Analysis Exceptions
Standardized error types for loading and analysing UAV telemetry
"""


class UAVFlightError(Exception):
    """Base class for all flight analysis errors"""
    pass


class ParseError(UAVFlightError):
    """Malformed or missing input column/value"""
    def __init__(self, message="Could not parse telemetry", column=None, row=None):
        self.column = column
        self.row = row
        details = []
        if column is not None:
            details.append(f"column '{column}'")
        if row is not None:
            details.append(f"row {row}")
        super().__init__(f"{message} [{', '.join(details)}]" if details else message)


class InsufficientDataError(UAVFlightError):
    """Fewer samples than a computation requires"""
    def __init__(self, required, actual, message="Not enough telemetry samples"):
        self.required = required
        self.actual = actual
        super().__init__(f"{message}: need at least {required}, got {actual}")


class InvalidParameterError(UAVFlightError):
    """Invalid window or threshold supplied"""
    def __init__(self, name, value, message="Invalid parameter value"):
        self.name = name
        self.value = value
        super().__init__(f"{message}: {name}={value!r}")


class DimensionMismatchError(UAVFlightError):
    """Smoothed series does not line up with its telemetry sequence"""
    def __init__(self, expected, actual, message="Length mismatch"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{message}: expected {expected} values, got {actual}")


class PipelineError(UAVFlightError):
    """A pipeline stage failed; the original error is chained as __cause__"""
    def __init__(self, stage, message="unknown error"):
        self.stage = stage
        super().__init__(f"Stage '{stage}' failed: {message}")
