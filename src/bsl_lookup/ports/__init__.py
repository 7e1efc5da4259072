"""Ports (interfaces) – depend on these, implement in adapters."""

from bsl_lookup.ports.interfaces import IExtractionStrategy, IPageFetcher

__all__ = ["IExtractionStrategy", "IPageFetcher"]
