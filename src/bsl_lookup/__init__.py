"""
BSL Lookup – resolve a phrase into British Sign Language video clips, one per word.

Use from an installed environment:
  from bsl_lookup.application.pipeline import SignLookupPipeline
  from bsl_lookup.adapters import default_adapters
  pipeline = SignLookupPipeline(**default_adapters())
  report = pipeline.run("black hat")

For tests or another dictionary site: implement ports (e.g. IPageFetcher) and inject.
"""

__version__ = "0.1.0"
