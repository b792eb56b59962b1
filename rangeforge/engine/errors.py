"""Engine error conditions.

All conditions subclass ``ValueError`` so callers that already guard
numeric input with ``except ValueError`` keep working.
"""


class RangeEngineError(ValueError):
    """Base class for range/projection engine failures."""


class InvalidRange(RangeEngineError):
    """High/low pair that cannot form a range (inverted, equal, non-finite)."""


class InvalidInput(RangeEngineError):
    """Caller contract violation: bad pip delta or unknown method tag."""
