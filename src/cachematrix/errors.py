"""Package-specific exceptions.

Inversion failures are not wrapped: whatever the inverter raises (for numpy,
``numpy.linalg.LinAlgError``) reaches the caller unchanged.
"""


class CacheMatrixError(Exception):
    """Base class for errors raised by cachematrix itself."""


class UnknownInverterError(CacheMatrixError, KeyError):
    """Raised when an inverter name is not in the registry."""

    def __init__(self, name: str, known=()):
        self.name = name
        self.known = tuple(sorted(known))
        super().__init__(name)

    def __str__(self) -> str:
        known = ", ".join(self.known) or "none"
        return f"unknown inverter {self.name!r} (registered: {known})"


class ConfigError(CacheMatrixError, ValueError):
    """Raised when a configuration value cannot be used."""


class SolveRecordError(CacheMatrixError, ValueError):
    """Raised when a solve record does not match its schema."""
