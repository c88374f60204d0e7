from __future__ import annotations


class GenLandingError(Exception):
    """Base class for every failure raised by genlanding."""


class ValidationFailure(GenLandingError, ValueError):
    """Input rejected before any request was issued."""


class TransportFailure(GenLandingError):
    """The generation endpoint could not be reached or answered with an error."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GenerationFailure(TransportFailure):
    """The generation endpoint answered with a non-success status."""


class DecodeFailure(GenLandingError, ValueError):
    """The payload was not valid JSON or did not match the expected shape."""


class BackendFailure(GenLandingError):
    """The Gemini call itself failed or produced no usable text."""


__all__ = [
    "BackendFailure",
    "DecodeFailure",
    "GenLandingError",
    "GenerationFailure",
    "TransportFailure",
    "ValidationFailure",
]
