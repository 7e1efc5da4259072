"""
WordResolver – fetch and extract each word in order, absorbing per-word faults.
ResultAssembler – drop empty outcomes, keep order, count.
"""

import logging
import time
from typing import Callable, List, Optional, Sequence

from bsl_lookup.application.extractor import VideoExtractor
from bsl_lookup.domain.errors import NoResultsFound, ResolutionCancelled, UpstreamUnavailable
from bsl_lookup.domain.models import ResolutionReport, Word, WordOutcome
from bsl_lookup.ports.interfaces import IPageFetcher

logger = logging.getLogger(__name__)


class WordResolver:
    """
    Sequential per-word resolution. One word's failure never aborts the batch;
    only the overall time budget or a cancellation abandons the whole phrase.
    """

    def __init__(
        self,
        *,
        fetcher: IPageFetcher,
        extractor: VideoExtractor,
        time_budget: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fetcher = fetcher
        self._extractor = extractor
        self._time_budget = time_budget
        self._clock = clock

    def resolve(
        self,
        words: Sequence[Word],
        is_cancelled: Optional[Callable[[], bool]] = None,
    ) -> List[WordOutcome]:
        started = self._clock()
        outcomes = []
        for i, word in enumerate(words):
            if is_cancelled is not None and is_cancelled():
                logger.info("Resolution cancelled before word %d/%d", i + 1, len(words))
                raise ResolutionCancelled()
            remaining = self._remaining(started, i, len(words))
            outcomes.append(self._resolve_word(word, remaining))
        # The last fetch may still overrun by its parse time or urllib3 retries
        self._remaining(started, len(words), len(words))
        return outcomes

    def _remaining(self, started: float, done: int, total: int) -> Optional[float]:
        """Seconds left in the budget, None without a budget. Raises once the budget is spent."""
        if self._time_budget is None:
            return None
        elapsed = self._clock() - started
        if elapsed > self._time_budget:
            logger.warning(
                "Time budget of %ss exceeded after %d/%d words", self._time_budget, done, total
            )
            raise UpstreamUnavailable(
                detail=f"resolved {done} of {total} words in {elapsed:.1f}s"
            )
        return self._time_budget - elapsed

    def _resolve_word(self, word: Word, timeout: Optional[float] = None) -> WordOutcome:
        try:
            result = self._fetcher.fetch(word, timeout=timeout)
            if not result.ok:
                logger.info("Skipping %s: %s", word, result.reason)
                return WordOutcome(word=word)
            video = self._extractor.extract(word, result.markup, base_url=result.url)
            return WordOutcome(word=word, video=video)
        except Exception:
            logger.exception('Error scraping word "%s"', word)
            return WordOutcome(word=word)


class ResultAssembler:
    def assemble(self, outcomes: Sequence[WordOutcome]) -> ResolutionReport:
        """Keep resolved outcomes in order. Raises NoResultsFound when none resolved."""
        report = ResolutionReport(outcomes=list(outcomes))
        if not report.videos:
            raise NoResultsFound(detail=f"0 of {len(outcomes)} words resolved")
        return report
