"""Exception types raised by the matcher library."""


class MatcherError(Exception):
    """Base class for all matcher errors."""


class ConfigurationError(MatcherError, ValueError):
    """Raised for invalid matcher configuration, before any scanning starts."""


class UnknownStrategyError(ConfigurationError):
    """Raised when a strategy tag does not name a supported algorithm."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown matching strategy: {value!r}")
