from typing import Optional


class AnalysisError(Exception):
    """Base class for every failure an analysis call can report to its caller."""


class ConfigurationError(AnalysisError):
    """Raised before any I/O when the client is missing a credential or endpoint."""


class ImageEncodingError(AnalysisError):
    """The supplied image could not be decoded and re-encoded as JPEG."""


class TransportError(AnalysisError):
    """Network, DNS or TLS failure while talking to the analysis service."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class EmptyResponseError(AnalysisError):
    """The service answered without an error but also without a body."""


class ParseError(AnalysisError):
    """
    The service answered with a body that is not valid JSON.

    Keeps the decode failure and, when the transport also reported one,
    the transport error alongside it.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None,
                 transport_error: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
        self.transport_error = transport_error
