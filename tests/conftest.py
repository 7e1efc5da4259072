import pytest

from bsl_lookup.adapters.markup import default_strategies
from bsl_lookup.application.pipeline import SignLookupPipeline
from bsl_lookup.domain.models import FetchFailure, FetchSuccess
from bsl_lookup.ports.interfaces import IPageFetcher

BASE = "https://www.signbsl.com/sign/"


def sign_page(word, video_url, poster_url="", source="SignStation"):
    """A dictionary page shaped like signbsl.com entries."""
    caption = (
        f'<div style="float:left"><span style="color:#666">{source}</span></div>'
        if source else ""
    )
    return f"""
<html><head><title>{word} - BSL</title></head><body>
<div itemprop="video" itemscope itemtype="http://schema.org/VideoObject">
  <video controls poster="{poster_url}">
    <source src="{video_url}" type="video/mp4">
  </video>
  {caption}
</div>
</body></html>
"""


def meta_page(video_url, image_url=""):
    return f"""
<html><head>
<meta property="og:title" content="Sign">
<meta property="og:video" content="{video_url}">
<meta property="og:image" content="{image_url}">
</head><body><p>No player here</p></body></html>
"""


EMPTY_PAGE = "<html><head><title>Not found</title></head><body><p>No sign</p></body></html>"


class FakePageFetcher(IPageFetcher):
    """
    Deterministic fetcher. pages maps word -> markup (str), HTTP status (int),
    (status, error page body) or an exception instance to raise. Unknown words return 404.
    """

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.calls = []
        self.timeouts = []

    def url_for(self, word):
        return BASE + word

    def fetch(self, word, timeout=None):
        self.calls.append(word)
        self.timeouts.append(timeout)
        url = self.url_for(word)
        page = self.pages.get(word, 404)
        if isinstance(page, Exception):
            raise page
        if isinstance(page, int):
            return FetchFailure(word=word, url=url, status=page)
        if isinstance(page, tuple):
            status, body = page
            return FetchFailure(word=word, url=url, status=status, markup=body)
        return FetchSuccess(word=word, url=url, markup=page)


@pytest.fixture
def make_pipeline():
    def _make(pages, time_budget=None):
        fetcher = FakePageFetcher(pages)
        return SignLookupPipeline(
            fetcher=fetcher,
            strategies=default_strategies(site_name="signbsl.com"),
            time_budget=time_budget,
        )
    return _make


@pytest.fixture
def phrase_pages():
    return {
        "black": sign_page("black", "https://media.signbsl.com/videos/bsl/black.mp4",
                           "https://media.signbsl.com/posters/black.jpg", "SignStation"),
        "hat": sign_page("hat", "https://media.signbsl.com/videos/bsl/hat.mp4",
                         "https://media.signbsl.com/posters/hat.jpg", "Sign BSL"),
        "cat": meta_page("https://media.signbsl.com/videos/bsl/cat.mp4",
                         "https://media.signbsl.com/posters/cat.jpg"),
    }
