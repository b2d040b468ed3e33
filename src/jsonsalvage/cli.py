"""Command-line interface for jsonsalvage.

This module provides the CLI entry point. It handles argument parsing,
reading model output from a file or stdin, and starting the HTTP server.

The CLI supports an 'extract' command that prints the recovered JSON for a
piece of model output, and a 'server' command that runs the FastAPI app.
"""
import argparse
import logging
import sys
from pathlib import Path

from jsonsalvage.config import ConfigError, load_settings
from jsonsalvage.core.pipeline import extract
from jsonsalvage.log import configure_logging

logger = logging.getLogger("jsonsalvage.cli")


def read_input(path: str | None) -> str:
    """Read the text to process.

    Args:
        path: File to read, or None / "-" to read stdin.

    Returns:
        The full input text.

    Raises:
        FileNotFoundError: If path names a file that does not exist.
    """
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the jsonsalvage command."""
    parser = argparse.ArgumentParser(prog="jsonsalvage")
    subparsers = parser.add_subparsers(dest="command")

    extract_parser = subparsers.add_parser("extract", help="Recover JSON from model output")
    extract_parser.add_argument("file", nargs="?", default=None)
    extract_parser.add_argument("--check", action="store_true")

    server_parser = subparsers.add_parser("server", help="Run the HTTP server")
    server_parser.add_argument("--host", default="127.0.0.1")
    server_parser.add_argument("--port", type=int, default=8000)
    server_parser.add_argument("--reload", action="store_true")

    return parser


def main() -> None:
    """Main entry point for the jsonsalvage CLI.

    Commands:
        extract: Print the recovered JSON for model output with the options:
            file: Path to read (positional, optional; stdin when omitted or "-")
            --check: Exit with status 1 when no JSON value was recovered

        server: Start the FastAPI server with the options:
            --host: Host address to bind (default: 127.0.0.1)
            --port: Port number to bind (default: 8000)
            --reload: Enable auto-reload on code changes

    Raises:
        SystemExit: Exit code 0 for success, 1 for errors (file not found,
            invalid configuration, --check with nothing recovered).

    Examples:
        jsonsalvage extract response.txt
        cat response.txt | jsonsalvage extract --check
        jsonsalvage server --host 0.0.0.0 --port 8000
    """
    parser = build_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    configure_logging(settings)
    logger.debug(f"CLI args parsed: command={args.command}")

    if args.command == "extract":
        try:
            text = read_input(args.file)
        except FileNotFoundError:
            logger.error(f"Input file not found: {args.file}")
            print(f"Error: input file not found: {args.file}", file=sys.stderr)
            sys.exit(1)

        result = extract(text)
        logger.info(f"Extraction finished: found={result.found}, stage={result.stage}")
        print(result.text)
        if args.check and not result.found:
            print("Error: no JSON value found", file=sys.stderr)
            sys.exit(1)

    elif args.command == "server":
        import uvicorn

        uvicorn.run("jsonsalvage.server:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
