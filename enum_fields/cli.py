"""Command-line entry point: expand an enum declaration with extra fields."""

from __future__ import annotations

import argparse
import logging
import sys

from .config import TransformConfig, UnreachablePolicy
from .errors import MalformedFieldList, TransformError
from .stats import expansion_stats
from .transform import expand

logger = logging.getLogger(__name__)


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enum-fields",
        description="Inject fields into every variant of a Rust enum and "
        "generate accessors for them",
    )
    parser.add_argument(
        "declaration", help="File holding the enum declaration ('-' for stdin)"
    )
    fields = parser.add_mutually_exclusive_group(required=True)
    fields.add_argument("--fields", "-f", help="File holding the field list")
    fields.add_argument(
        "--fields-text", "-t", help="Field list given inline, e.g. 'id: u64'"
    )
    parser.add_argument(
        "--loop-unreachable",
        action="store_true",
        help="Use `loop {}` instead of `unreachable!()` for enums without variants",
    )
    parser.add_argument(
        "--no-allow-unused",
        action="store_true",
        help="Do not mark accessors with #[allow(unused)]",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="On failure print a compile_error! invocation instead of exiting",
    )
    parser.add_argument(
        "--stats", action="store_true", help="Print expansion statistics to stderr"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    fields_text = args.fields_text if args.fields is None else _read(args.fields)
    declaration_text = _read(args.declaration)
    config = TransformConfig(
        unreachable_policy=(
            UnreachablePolicy.LOOP
            if args.loop_unreachable
            else UnreachablePolicy.UNREACHABLE
        ),
        allow_unused=not args.no_allow_unused,
    )

    try:
        expansion = expand(fields_text, declaration_text, config)
    except TransformError as exc:
        if args.tokens:
            print(exc.diagnostic.to_compile_error())
            return 0
        if isinstance(exc, MalformedFieldList):
            path = args.fields or ""
        else:
            path = "" if args.declaration == "-" else args.declaration
        print(exc.diagnostic.format(path), file=sys.stderr)
        return 1

    sys.stdout.write(expansion.text)
    if args.stats:
        print(expansion_stats(expansion).report(), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
