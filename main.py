"""CLI entrypoint for the word ring puzzle."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, TextIO

from wordring.core.constants import RejectReason
from wordring.core.exceptions import CatalogError, InvariantViolation, MalformedLevelError
from wordring.data.catalog import LevelCatalog, default_catalog, load_catalog
from wordring.engine.ring import RingConfig
from wordring.engine.session import GameSession, SubmitResult
from wordring.engine.validator import validate_catalog
from wordring.io.remote_catalog import RemoteCatalogClient
from wordring.utils.logger import configure_logging
from wordring.utils.pretty import print_session_status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play or validate word ring levels in the terminal",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--catalog", type=Path, help="Path to a JSON level catalog")
    source.add_argument("--catalog-url", type=str, help="URL of a JSON level catalog")
    parser.add_argument(
        "--level",
        type=int,
        default=1,
        help="Level number to start from (1-based)",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate every level of the catalog and exit",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Drop remote levels that fail validation instead of failing",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for ring shuffles")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def load_source(args: argparse.Namespace) -> LevelCatalog:
    if args.catalog:
        return load_catalog(args.catalog)
    if args.catalog_url:
        return RemoteCatalogClient(args.catalog_url).fetch(skip_invalid=args.skip_invalid)
    return default_catalog()


def run_validation(catalog: LevelCatalog, stream: TextIO) -> int:
    failures = 0
    for entry, result in zip(catalog.entries, validate_catalog(catalog)):
        status = "ok" if result.ok else "FAIL"
        print(f"{entry.id:>3} {entry.name:<20} {status}", file=stream)
        for message in result.messages:
            print(f"      {message}", file=stream)
        if not result.ok:
            failures += 1
    print(f"{len(catalog) - failures}/{len(catalog)} levels valid", file=stream)
    return 1 if failures else 0


def play_word(session: GameSession, word: str) -> Optional[SubmitResult]:
    """Replay ``word`` as a drag gesture across the ring tokens."""

    tokens = session.ring.tokens_for_word(word)
    if not tokens:
        return session.submit(word)
    session.begin_selection(tokens[0].token_id)
    for token in tokens[1:]:
        session.extend_selection(token.x, token.y)
    return session.end_selection()


def describe(result: Optional[SubmitResult]) -> str:
    if result is None:
        return "Too short."
    if result.accepted:
        message = f"Found {result.word}!"
        if result.level_completed:
            message += " Level complete."
        return message
    if result.reason == RejectReason.ALREADY_FOUND:
        return f"Already found {result.word}."
    return f"{result.word} is not in this level."


def interactive(session: GameSession, stdin: TextIO, stdout: TextIO) -> None:
    print_session_status(session, stream=stdout)
    for line in stdin:
        command = line.strip()
        if not command:
            continue
        if command == ":quit":
            break
        if command == ":shuffle":
            session.shuffle()
        elif command == ":hint":
            placed = session.hint()
            if placed is not None:
                print(f"Try a {len(placed.word)}-letter word starting with {placed.word[0]}", file=stdout)
        elif command.startswith(":level"):
            try:
                session.submit_level(int(command.split()[1]) - 1)
            except (IndexError, ValueError, CatalogError, MalformedLevelError, InvariantViolation) as exc:
                print(f"Cannot switch level: {exc}", file=stdout)
        else:
            result = play_word(session, command)
            print(describe(result), file=stdout)
            if result is not None and result.level_completed:
                try:
                    loaded = session.advance()
                except (MalformedLevelError, InvariantViolation) as exc:
                    print(f"Cannot load next level: {exc}", file=stdout)
                    print("Use :level N to pick another level.", file=stdout)
                else:
                    if loaded is None:
                        print("All levels complete.", file=stdout)
                        break
        print_session_status(session, stream=stdout)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        catalog = load_source(args)
    except CatalogError as exc:
        parser.error(str(exc))

    if args.validate:
        return run_validation(catalog, sys.stdout)

    if not 1 <= args.level <= len(catalog):
        parser.error(f"--level must be between 1 and {len(catalog)}")
    catalog.go_to(args.level - 1)

    try:
        session = GameSession(catalog, ring_config=RingConfig(rng_seed=args.seed))
    except (MalformedLevelError, InvariantViolation) as exc:
        print(f"Level {args.level} cannot be loaded: {exc}", file=sys.stderr)
        return 1

    interactive(session, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
