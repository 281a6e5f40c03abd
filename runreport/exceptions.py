"""Custom exception classes for the run reporting package."""


class RunReportError(Exception):
    """Base class for runreport exceptions."""


class ArtifactIOError(RunReportError):
    """Raised when a result artifact or static asset cannot be persisted."""


class ProtocolViolationError(RunReportError):
    """Raised when lifecycle calls arrive out of order.

    Examples are writing with no open artifact, opening an artifact while
    another one is still open, or driving a tracker with no sink attached.
    """
