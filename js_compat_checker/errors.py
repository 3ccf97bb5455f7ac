"""
Exceptions raised by the compatibility analyzer.
"""


class CompatCheckerError(Exception):
    """Base class for analyzer errors."""


class LintEngineError(CompatCheckerError):
    """The lint engine could not analyze one source unit (recoverable)."""


class EngineUnavailableError(CompatCheckerError):
    """The lint engine cannot be launched at all."""


class StagingError(CompatCheckerError):
    """The staging directory for lint input could not be prepared."""


class AnalysisError(CompatCheckerError):
    """A run-terminating failure; the cause is chained via ``__cause__``."""
