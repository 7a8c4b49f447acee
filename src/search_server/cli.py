"""Console front end: build an index from line-based input and run queries.

Input layout (stdin or ``--input``)::

    <stop words>
    <document count N>
    <document 0 text>
    <k> <rating 1> ... <rating k>
    ...                              # N text/ratings pairs
    <query>                          # every remaining non-blank line
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
from pathlib import Path
import sys
from typing import TextIO

from pydantic import ValidationError

from search_server.config import Settings
from search_server.observability.logging import configure_logging
from search_server.paginator import paginate
from search_server.request_queue import RequestQueue
from search_server.search.errors import SearchServerError
from search_server.search_server import SearchServer


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ConsoleInput:
    """Parsed console input."""

    stop_words: str
    documents: list[tuple[str, list[int]]] = field(default_factory=list)
    queries: list[str] = field(default_factory=list)


def parse_console_input(lines: Sequence[str]) -> ConsoleInput:
    """Parse raw input lines.

    Raises:
        ValueError: Missing lines or non-numeric counts and ratings.
    """

    cursor = iter(line.rstrip("\r\n") for line in lines)

    def next_line(what: str) -> str:
        try:
            return next(cursor)
        except StopIteration:
            raise ValueError(f"Unexpected end of input while reading {what}") from None

    parsed = ConsoleInput(stop_words=next_line("stop words"))
    document_count = _parse_int(next_line("document count"), "document count")
    if document_count < 0:
        raise ValueError(f"Document count must be >= 0, got {document_count}")

    for document_id in range(document_count):
        text = next_line(f"document {document_id} text")
        ratings = _parse_ratings(next_line(f"document {document_id} ratings"), document_id)
        parsed.documents.append((text, ratings))

    parsed.queries = [line for line in cursor if line.strip()]
    return parsed


def _parse_int(value: str, what: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"Invalid {what}: {value!r}") from None


def _parse_ratings(line: str, document_id: int) -> list[int]:
    fields = line.split()
    if not fields:
        raise ValueError(f"Missing ratings count for document {document_id}")
    count = _parse_int(fields[0], f"ratings count for document {document_id}")
    values = fields[1:]
    if count < 0 or len(values) != count:
        raise ValueError(f"Document {document_id} declares {count} ratings but has {len(values)}")
    return [_parse_int(value, f"rating for document {document_id}") for value in values]


def build_search_server(console_input: ConsoleInput, settings: Settings) -> SearchServer:
    """Index every document with its position as id and ACTUAL status."""

    server = SearchServer.from_settings(settings, stop_words=console_input.stop_words)
    for document_id, (text, ratings) in enumerate(console_input.documents):
        server.add_document(document_id, text, ratings=ratings)
    logger.info("Indexed %d documents", server.get_document_count())
    return server


def run_queries(
    queue: RequestQueue,
    queries: Sequence[str],
    *,
    page_size: int,
    out: TextIO,
) -> None:
    for raw_query in queries:
        out.write(f"Query: {raw_query}\n")
        try:
            results = queue.add_find_request(raw_query)
        except SearchServerError as exc:
            logger.warning("Query rejected: %s", exc)
            out.write(f"Error: {exc}\n")
            continue
        for page in paginate(results, page_size):
            out.write(f"{page}\n")
            out.write("Page break\n")


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Index documents from line-based input and print ranked query results",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Read input from this file instead of stdin",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        help="Results per printed page (defaults to SEARCH_SERVER_PAGE_SIZE)",
    )
    return parser


def _read_lines(path: Path | None) -> list[str]:
    if path is None:
        return sys.stdin.read().splitlines()
    return path.read_text(encoding="utf-8").splitlines()


def main(argv: Sequence[str] | None = None, *, out: TextIO | None = None) -> int:
    out = out or sys.stdout
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as exc:
        sys.stderr.write(f"Invalid configuration: {exc}\n")
        return 1

    configure_logging(settings.log_level, settings.log_json, stream=sys.stderr)

    page_size = args.page_size if args.page_size is not None else settings.page_size
    if page_size < 1:
        logger.error("--page-size must be >= 1")
        return 1

    try:
        console_input = parse_console_input(_read_lines(args.input))
    except FileNotFoundError as exc:
        logger.error("Input file not found: %s", exc)
        return 1
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        return 1

    try:
        server = build_search_server(console_input, settings)
    except SearchServerError as exc:
        logger.error("Failed to build index: %s", exc)
        return 1

    queue = RequestQueue(server, window_size=settings.request_window_size)
    run_queries(queue, console_input.queries, page_size=page_size, out=out)
    out.write(f"No-result requests: {queue.get_no_result_requests()}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
