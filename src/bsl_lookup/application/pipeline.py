"""
Sign lookup pipeline – single responsibility: orchestrate tokenize → fetch → extract → assemble.
Depends only on port interfaces (SOLID – Dependency Inversion).
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from bsl_lookup.application.extractor import VideoExtractor
from bsl_lookup.application.resolver import ResultAssembler, WordResolver
from bsl_lookup.domain.models import ResolutionReport, Word
from bsl_lookup.domain.tokenizer import tokenize
from bsl_lookup.ports.interfaces import IExtractionStrategy, IPageFetcher

logger = logging.getLogger(__name__)

PROBE_WORD = "black"
PROBE_PREVIEW_CHARS = 500


class SignLookupPipeline:
    """
    Resolves a phrase into one sign video per word.
    All dependencies are injected (ports); no concrete implementations here.
    """

    def __init__(
        self,
        *,
        fetcher: IPageFetcher,
        strategies: Sequence[IExtractionStrategy],
        time_budget: Optional[float] = None,
    ):
        self._fetcher = fetcher
        self._extractor = VideoExtractor(strategies)
        self._resolver = WordResolver(
            fetcher=fetcher, extractor=self._extractor, time_budget=time_budget
        )
        self._assembler = ResultAssembler()

    @property
    def extractor(self) -> VideoExtractor:
        return self._extractor

    def run(
        self,
        phrase: Optional[str],
        is_cancelled: Optional[Callable[[], bool]] = None,
    ) -> ResolutionReport:
        """Resolve a phrase. Raises InvalidInput, NoResultsFound or UpstreamUnavailable."""
        words = tokenize(phrase)
        logger.info("Resolving %d word(s): %s", len(words), " ".join(words))
        outcomes = self._resolver.resolve(words, is_cancelled=is_cancelled)
        report = self._assembler.assemble(outcomes)
        logger.info("Resolved %d/%d words", report.words_resolved, report.words_requested)
        return report

    def word_urls(self, phrase: Optional[str]) -> List[Dict[str, Word]]:
        """Per-word dictionary URLs without fetching, for clients that fetch pages themselves."""
        return [{"word": w, "url": self._fetcher.url_for(w)} for w in tokenize(phrase)]

    def probe(self, word: Word = PROBE_WORD) -> Dict[str, Any]:
        """Fetch one page and report what the markup contains. Used to check the site still answers."""
        result = self._fetcher.fetch(word)
        if not result.ok:
            failure = {
                "success": False,
                "url": result.url,
                "status": result.status,
                "error": result.reason,
            }
            # Error page body, e.g. a bot-block notice
            if result.markup:
                failure["htmlLength"] = len(result.markup)
                failure["htmlPreview"] = result.markup[:PROBE_PREVIEW_CHARS]
            return failure
        html = result.markup
        return {
            "success": True,
            "url": result.url,
            "status": result.status,
            "htmlLength": len(html),
            "hasVideoTag": "<video" in html,
            "hasSourceTag": "<source" in html,
            "hasMetaVideo": "og:video" in html,
            "hasExtractableVideo": self._extractor.extract(word, html) is not None,
            "htmlPreview": html[:PROBE_PREVIEW_CHARS],
        }
