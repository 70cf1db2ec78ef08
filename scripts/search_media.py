#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys

from media_hub.aggregator import MediaAggregator
from media_hub.config import find_env_file, load_settings
from media_hub.errors import InvalidInput, InvalidType, UpstreamError
from media_hub.models.media import MediaType, UnifiedResult


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="search_media",
        description="Search or list trending titles through the unified media aggregator.",
    )
    parser.add_argument("type", help=f"Media type: {', '.join(m.value for m in MediaType)}.")
    parser.add_argument("--query", default=None, help="Free-text search. Omit to list trending titles.")
    parser.add_argument("--json", action="store_true", help="Print results as a JSON array.")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def _format_line(result: UnifiedResult) -> str:
    score = f"{result.score:.2f}" if result.score is not None else "-"
    return f"{result.id}\t{score}\t{result.title}"


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    aggregator = MediaAggregator(load_settings(env_file=find_env_file()))
    try:
        if args.query is not None:
            results = aggregator.search(args.type, args.query)
        else:
            results = aggregator.trending(args.type)
    except (InvalidInput, InvalidType) as exc:
        print(f"search_media: {exc.message}", file=sys.stderr)
        return 2
    except UpstreamError as exc:
        print(f"search_media: {exc.message} ({exc.provider})", file=sys.stderr)
        return 1
    finally:
        aggregator.close()

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
    else:
        for result in results:
            print(_format_line(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
