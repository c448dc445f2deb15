"""CLI entrypoint for streaming a remote paginated collection."""

from __future__ import annotations

import argparse
import itertools
import json
import logging
from typing import Optional, Sequence

from pagedlist.client import fetch_paginated_list
from pagedlist.codec.json_decoder import JsonPageDecoder
from pagedlist.codec.msgpack_decoder import MsgpackPageDecoder
from pagedlist.config.logging_config import setup_logging
from pagedlist.config.settings import get_settings
from pagedlist.pagination.errors import PaginationError
from pagedlist.transport.http_resolver import HttpPageResolver

_DECODERS = {
    "json": JsonPageDecoder,
    "msgpack": MsgpackPageDecoder,
}


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(description="Stream every element of a paginated collection.")
    parser.add_argument("--url", required=True, help="URL of the first page.")
    parser.add_argument(
        "--limit",
        type=_non_negative_int,
        default=None,
        help="Stop after this many elements.",
    )
    parser.add_argument(
        "--format",
        choices=sorted(_DECODERS),
        default="json",
        help="Encoding of the page documents.",
    )
    parser.add_argument(
        "--total-only",
        action="store_true",
        help="Print the reported total and per-page size without streaming.",
    )
    parser.add_argument("--log-level", default=None, help="Log level, e.g. DEBUG.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fetch the collection and print one JSON element per line."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(
        log_dir=settings.logs_dir,
        level=args.log_level or settings.logging.level,
        log_file=settings.logging.log_file,
    )

    logger = logging.getLogger(__name__)

    resolver = HttpPageResolver(base_url=args.url, settings=settings.resolver)
    decoder = _DECODERS[args.format](settings=settings.decoder)

    try:
        collection = fetch_paginated_list(args.url, dict, resolver=resolver, decoder=decoder)

        if args.total_only:
            print(f"total={collection.total()} per_page={collection.per_page()}")
            return 0

        streamed = 0
        for element in itertools.islice(collection.stream(), args.limit):
            print(json.dumps(element, default=str))
            streamed += 1
    except PaginationError as exc:
        logger.error("Pagination failed: %s", exc)
        return 1
    finally:
        resolver.close()

    logger.info("Streamed %d elements from %s", streamed, args.url)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
