"""VideoExtractor – first non-empty result across strategies in priority order."""

import logging
from dataclasses import replace
from typing import Optional, Sequence
from urllib.parse import urljoin

from bsl_lookup.domain.models import VideoRef, Word
from bsl_lookup.ports.interfaces import IExtractionStrategy

logger = logging.getLogger(__name__)


class VideoExtractor:
    def __init__(self, strategies: Sequence[IExtractionStrategy]):
        if not strategies:
            raise ValueError("VideoExtractor needs at least one extraction strategy")
        self._strategies = list(strategies)

    @property
    def strategies(self):
        return list(self._strategies)

    def extract(self, word: Word, markup: str, base_url: Optional[str] = None) -> Optional[VideoRef]:
        """
        Return the video for a word, or None when no strategy matches.
        A page without an extractable video is a normal outcome, not an error.
        With base_url, site-relative video and poster URLs are made absolute.
        """
        for strategy in self._strategies:
            video = strategy.extract(word, markup)
            if video is None:
                continue
            logger.debug("Extracted %s via %s: %s", word, strategy.name, video.video_url)
            if base_url:
                video = replace(
                    video,
                    video_url=urljoin(base_url, video.video_url),
                    poster_url=urljoin(base_url, video.poster_url) if video.poster_url else "",
                )
            return video
        logger.info("No video found in page for %s", word)
        return None
