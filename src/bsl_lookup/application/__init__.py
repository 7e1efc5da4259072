"""Application layer – use cases and pipeline orchestration."""

from bsl_lookup.application.extractor import VideoExtractor
from bsl_lookup.application.pipeline import SignLookupPipeline
from bsl_lookup.application.resolver import ResultAssembler, WordResolver

__all__ = ["ResultAssembler", "SignLookupPipeline", "VideoExtractor", "WordResolver"]
