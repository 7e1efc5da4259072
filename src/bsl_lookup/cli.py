"""
CLI entrypoint:
  bsl-lookup black hat
  bsl-lookup "good morning" --json
"""

import argparse
import json
import logging
import sys

from bsl_lookup.domain.errors import InvalidInput, SignLookupError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find a British Sign Language video for each word of a phrase"
    )
    parser.add_argument("phrase", nargs="+", help="Words to look up, e.g. black hat")
    parser.add_argument("--json", action="store_true", help="Print the full report as JSON")
    parser.add_argument("--timeout", type=float, help="Per-word fetch timeout in seconds")
    parser.add_argument("--budget", type=float, help="Overall time budget in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log fetch diagnostics")
    return parser


def main(argv=None, pipeline=None) -> int:
    from bsl_lookup import config

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if pipeline is None:
        from bsl_lookup.adapters import RequestsPageFetcher, default_adapters
        from bsl_lookup.application.pipeline import SignLookupPipeline
        fetcher = RequestsPageFetcher(timeout=args.timeout)
        budget = args.budget if args.budget is not None else config.RESOLUTION_TIME_BUDGET
        pipeline = SignLookupPipeline(**default_adapters(fetcher=fetcher), time_budget=budget)

    phrase = " ".join(args.phrase)
    try:
        report = pipeline.run(phrase)
    except InvalidInput as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2
    except SignLookupError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    for video in report.videos:
        print(f"{video.word}\t{video.video_url}\t{video.source}")
    missing = [o.word for o in report.outcomes if not o.resolved]
    print(f"\nFound {report.words_resolved}/{report.words_requested} words", file=sys.stderr)
    if missing:
        print(f"No video for: {', '.join(missing)}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
