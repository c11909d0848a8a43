"""Command line entry point: render query documents to CQL."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cqlbuilder import __version__
from cqlbuilder.compiler.pipeline import CompilationPipeline
from cqlbuilder.errors import CqlBuilderError, QueryDocumentError
from cqlbuilder.parser.loader import QueryLoader
from cqlbuilder.settings import Settings

logger = logging.getLogger("cqlbuilder.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cqlbuilder",
        description="Render declarative query documents (YAML or JSON) to CQL",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Print the CQL for one or more documents")
    render.add_argument("inputs", nargs="+", type=Path, help="Query document files")
    mode = render.add_mutually_exclusive_group()
    mode.add_argument(
        "--pretty",
        dest="pretty",
        action="store_true",
        default=None,
        help="Only quote identifiers that need it",
    )
    mode.add_argument(
        "--ugly",
        dest="pretty",
        action="store_false",
        help="Always quote identifiers (canonical form)",
    )
    parser.add_argument("--log-level", help="Override the configured log level")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line using settings from environment / .env file."""
    settings = Settings()
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=(args.log_level or settings.log_level).upper())
    logger.debug("cqlbuilder v%s (command=%s)", __version__, args.command)

    pretty = settings.pretty if args.pretty is None else args.pretty
    pipeline = CompilationPipeline(QueryLoader(max_document_size=settings.max_document_size))

    exit_code = 0
    for path in args.inputs:
        try:
            result = pipeline.compile_file(path, pretty=pretty)
        except QueryDocumentError as exc:
            print(f"{path}: {exc}", file=sys.stderr)
            for error in exc.errors:
                print(f"  - {error}", file=sys.stderr)
            exit_code = 1
        except CqlBuilderError as exc:
            print(f"{path}: {exc}", file=sys.stderr)
            exit_code = 1
        except OSError as exc:
            print(f"{path}: {exc.strerror or exc}", file=sys.stderr)
            exit_code = 1
        else:
            print(result.cql)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
