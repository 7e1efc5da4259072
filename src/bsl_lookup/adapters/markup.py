"""
Extraction strategies over dictionary page markup (BeautifulSoup).

Each strategy is a pure function of the page text: parse, collect candidate
videos in document order, and let the extractor keep the first one. The
attribution selector depends on incidental inline styles of signbsl.com and
lives only in StructuredVideoStrategy.
"""

from typing import List, Optional

from bs4 import BeautifulSoup

from bsl_lookup.domain.models import UNKNOWN_SOURCE, VideoRef, Word
from bsl_lookup.ports.interfaces import IExtractionStrategy

# Caption block the site renders next to each clip: <div style="float:left"><span style="color:#666">
ATTRIBUTION_SELECTOR = 'div[style*="float:left"] span[style*="color:#666"]'
VIDEO_SELECTOR = "video[src], video source[src]"
META_VIDEO_PROPERTIES = ("og:video", "og:video:secure_url", "og:video:url")
META_IMAGE_PROPERTY = "og:image"


def parse_markup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup or "", "html.parser")


def _attr(tag, name: str) -> str:
    if tag is None:
        return ""
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return (value or "").strip()


class StructuredVideoStrategy(IExtractionStrategy):
    """<video> / <video><source> elements, poster from the video, caption from the itemprop=video block."""

    name = "structured_video"

    def candidates(self, word: Word, markup: str) -> List[VideoRef]:
        soup = parse_markup(markup)
        found = []
        for element in soup.select(VIDEO_SELECTOR):
            src = _attr(element, "src")
            if not src:
                continue
            video_el = element if element.name == "video" else element.find_parent("video")
            found.append(VideoRef(
                word=word,
                video_url=src,
                poster_url=_attr(video_el, "poster"),
                source=self._attribution(element),
            ))
        return found

    def _attribution(self, element) -> str:
        container = element.find_parent(attrs={"itemprop": "video"})
        if container is None:
            return UNKNOWN_SOURCE
        label = container.select_one(ATTRIBUTION_SELECTOR)
        text = label.get_text(strip=True) if label is not None else ""
        return text or UNKNOWN_SOURCE


class MetaTagStrategy(IExtractionStrategy):
    """Open Graph og:video / og:image tags, attributed to the site itself."""

    name = "meta_tags"

    def __init__(self, site_name: Optional[str] = None):
        if site_name is None:
            from bsl_lookup import config
            site_name = config.SIGN_SOURCE_NAME
        self.site_name = site_name

    def candidates(self, word: Word, markup: str) -> List[VideoRef]:
        soup = parse_markup(markup)
        poster = _attr(self._meta(soup, META_IMAGE_PROPERTY), "content")
        found = []
        for prop in META_VIDEO_PROPERTIES:
            url = _attr(self._meta(soup, prop), "content")
            if url:
                found.append(VideoRef(word=word, video_url=url, poster_url=poster, source=self.site_name))
        return found

    @staticmethod
    def _meta(soup: BeautifulSoup, prop: str):
        # Some pages use name= instead of property= for Open Graph tags
        return soup.find("meta", attrs={"property": prop}) or soup.find("meta", attrs={"name": prop})


def default_strategies(site_name: Optional[str] = None) -> List[IExtractionStrategy]:
    """Priority order: structured video first, metadata tags as fallback."""
    return [StructuredVideoStrategy(), MetaTagStrategy(site_name=site_name)]
