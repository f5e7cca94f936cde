"""
Error taxonomy shared by the gateway relays and the client-side controllers
"""


class AsciiStudioError(Exception):
    """Base class for every failure surfaced to a user."""


class ValidationFailure(AsciiStudioError):
    """Input rejected locally; no request was sent."""


class BackendUnavailable(AsciiStudioError):
    """The rendering backend (or the gateway in front of it) failed."""


class MalformedResponse(BackendUnavailable):
    """A success status arrived with a body that does not have the expected shape."""
