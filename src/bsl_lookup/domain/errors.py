"""Lookup errors – the only faults that reach the caller as request-level errors."""


class SignLookupError(Exception):
    """Base error. Carries a machine-readable kind and an HTTP status for the API layer."""

    kind = "lookup_error"
    status_code = 500
    default_message = "Sign lookup failed"

    def __init__(self, message: str = None, detail: str = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class InvalidInput(SignLookupError):
    """Missing phrase, or a phrase with no words after tokenization."""

    kind = "invalid_input"
    status_code = 400
    default_message = "No valid words found in phrase"


class NoResultsFound(SignLookupError):
    """Every word of the phrase came back without a playable video."""

    kind = "no_results"
    status_code = 404
    default_message = "No videos found for the searched phrase. Please try different words."


class UpstreamUnavailable(SignLookupError):
    kind = "upstream_unavailable"
    status_code = 504
    default_message = "The sign dictionary did not respond in time"


class ResolutionCancelled(UpstreamUnavailable):
    kind = "cancelled"
    default_message = "Sign lookup was cancelled"


class InternalFault(SignLookupError):
    kind = "internal_error"
    status_code = 500
    default_message = "Internal server error"
