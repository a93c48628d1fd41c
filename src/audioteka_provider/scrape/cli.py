from __future__ import annotations

import argparse
import asyncio

from audioteka_provider.api.formatting import format_matches
from audioteka_provider.core.config import get_settings
from audioteka_provider.core.logging import configure_logging, logger
from audioteka_provider.scrape.provider import build_provider


def main() -> None:
    parser = argparse.ArgumentParser(description="Look up audiobook metadata on Audioteka")
    parser.add_argument("query", help="Title to search for")
    parser.add_argument("--author", default=None, help="Author name (logged only)")
    parser.add_argument("--timeout", type=float, default=None, help="Outbound request timeout in seconds")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.debug)
    if args.timeout is not None:
        settings = settings.model_copy(update={"provider_timeout": args.timeout})

    provider = build_provider(settings)
    records = asyncio.run(provider.lookup(args.query, args.author))
    print(format_matches(records).model_dump_json(exclude_none=True, indent=2))
    logger.info("Lookup finished with %d matches", len(records))


if __name__ == "__main__":  # pragma: no cover
    main()
