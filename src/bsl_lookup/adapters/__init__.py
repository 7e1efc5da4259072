"""
Adapters – concrete implementations of ports.
RequestsPageFetcher talks to the live dictionary site; the markup strategies
parse its pages with BeautifulSoup. For tests or another source, pass an
IPageFetcher override into default_adapters().
"""

from bsl_lookup.adapters.http_fetcher import RequestsPageFetcher, encode_word
from bsl_lookup.adapters.markup import MetaTagStrategy, StructuredVideoStrategy, default_strategies


def default_adapters(**overrides):
    """
    Build default adapter instances (use package config).
    Overrides: fetcher=..., strategies=... for testing or another dictionary site.
    """
    defaults = dict(overrides)
    if "fetcher" not in defaults:
        defaults["fetcher"] = RequestsPageFetcher()
    if "strategies" not in defaults:
        defaults["strategies"] = default_strategies()
    return defaults


__all__ = [
    "MetaTagStrategy",
    "RequestsPageFetcher",
    "StructuredVideoStrategy",
    "default_adapters",
    "default_strategies",
    "encode_word",
]
