"""
Engine Exceptions

Only invalid calls raise. Sparse or missing data is modelled as an
empty result, never as an exception.
"""


class KpiEngineError(Exception):
    """Base class for all engine errors."""


class ValidationError(KpiEngineError, ValueError):
    """Invalid input: bad KPI definition, malformed event, bad window size."""


class InvalidPeriodError(ValidationError):
    """Unsupported period passed to a period-bounded query."""

    def __init__(self, period: str, supported: tuple = ("week", "month")):
        self.period = period
        self.supported = supported
        super().__init__(
            f"Unsupported period: {period!r} (expected one of {', '.join(supported)})"
        )


class UnknownKpiError(KpiEngineError, KeyError):
    """Lookup of a KPI key that is not in the registry."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown KPI: {self.key}"
