"""Domain models, errors and tokenization."""

from bsl_lookup.domain.errors import (
    InternalFault,
    InvalidInput,
    NoResultsFound,
    ResolutionCancelled,
    SignLookupError,
    UpstreamUnavailable,
)
from bsl_lookup.domain.models import (
    UNKNOWN_SOURCE,
    FetchFailure,
    FetchResult,
    FetchSuccess,
    ResolutionReport,
    VideoRef,
    Word,
    WordOutcome,
)
from bsl_lookup.domain.tokenizer import tokenize

__all__ = [
    "FetchFailure",
    "FetchResult",
    "FetchSuccess",
    "InternalFault",
    "InvalidInput",
    "NoResultsFound",
    "ResolutionCancelled",
    "ResolutionReport",
    "SignLookupError",
    "UNKNOWN_SOURCE",
    "UpstreamUnavailable",
    "VideoRef",
    "Word",
    "WordOutcome",
    "tokenize",
]
