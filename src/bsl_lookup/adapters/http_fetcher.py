"""IPageFetcher adapter: one GET per word against the sign dictionary with requests."""

import logging
from typing import Optional
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from bsl_lookup.domain.models import FetchFailure, FetchResult, FetchSuccess, Word
from bsl_lookup.ports.interfaces import IPageFetcher

logger = logging.getLogger(__name__)

# encodeURIComponent leaves these unescaped as well as A-Z a-z 0-9 - _ . ~
_URI_COMPONENT_SAFE = "!~*'()"


def encode_word(word: Word) -> str:
    """Percent-encode a word for use as a single URL path segment."""
    return quote(word, safe=_URI_COMPONENT_SAFE)


class RequestsPageFetcher(IPageFetcher):
    """
    Fetches dictionary pages with a browser-like User-Agent and caching disabled.

    Headers go out with each request. A caller-supplied session is never
    modified; the retry adapter is mounted only on a session this fetcher creates.
    """

    def __init__(
        self,
        url_template: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        retries: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        from bsl_lookup import config

        self.url_template = url_template or config.SIGN_SOURCE_URL_TEMPLATE
        self.user_agent = user_agent or config.SIGN_USER_AGENT
        self.timeout = timeout if timeout is not None else config.FETCH_TIMEOUT
        self.retries = retries if retries is not None else config.FETCH_RETRIES

        if session is None:
            session = requests.Session()
            if self.retries > 0:
                # Opt-in only; the default is a single attempt so one slow word cannot stall the phrase
                retry_strategy = Retry(
                    total=self.retries,
                    backoff_factor=0.5,
                    status_forcelist=[429, 500, 502, 503, 504],
                    allowed_methods=["GET"],
                    raise_on_status=False,
                )
                adapter = HTTPAdapter(max_retries=retry_strategy)
                session.mount("http://", adapter)
                session.mount("https://", adapter)
        self.session = session

        self.headers = {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-GB,en;q=0.5",
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }

    def url_for(self, word: Word) -> str:
        return self.url_template.format(word=encode_word(word))

    def fetch(self, word: Word, timeout: Optional[float] = None) -> FetchResult:
        url = self.url_for(word)
        fetch_timeout = self.timeout if timeout is None else min(self.timeout, timeout)
        try:
            r = self.session.get(url, headers=self.headers, timeout=fetch_timeout)
        except requests.exceptions.Timeout as e:
            logger.warning("Timeout fetching %s (%s) after %ss", word, url, fetch_timeout)
            return FetchFailure(word=word, url=url, cause=f"timeout: {e}")
        except requests.exceptions.RequestException as e:
            logger.warning("Request error fetching %s (%s): %s", word, url, e)
            return FetchFailure(word=word, url=url, cause=str(e))

        # After redirects the page lives at r.url; relative video paths resolve against it
        final_url = r.url or url
        if not 200 <= r.status_code < 300:
            logger.warning("Failed to fetch %s: %s", word, r.status_code)
            return FetchFailure(word=word, url=final_url, status=r.status_code, markup=r.text or "")

        markup = r.text
        logger.info("Fetched %s: status=%s bytes=%d", word, r.status_code, len(r.content or b""))
        return FetchSuccess(word=word, url=final_url, markup=markup, status=r.status_code)
