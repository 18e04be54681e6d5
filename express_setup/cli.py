"""express-setup command line entry point.

Usage::

    express-setup
    python -m express_setup.cli --version
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from rich.markup import escape

from express_setup import __version__
from express_setup.config import Settings
from express_setup.prompts import collect_answers
from express_setup.scaffolder import ProjectGenerator, ScaffoldError
from express_setup.utils import console, print_banner

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="express-setup",
        description="Interactive CLI for setting up Express projects with TypeScript/JavaScript",
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=__version__,
        help="Output the current version",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``express-setup``."""
    build_parser().parse_args(argv)

    print_banner("Express Project Setup CLI", __version__)

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(exc))}")
        sys.exit(EXIT_FAILURE)

    try:
        answers = collect_answers(console)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[red]Setup cancelled.[/red]")
        sys.exit(EXIT_INTERRUPTED)

    generator = ProjectGenerator(answers, settings)
    try:
        asyncio.run(generator.generate())
    except ScaffoldError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        sys.exit(EXIT_FAILURE)
    except KeyboardInterrupt:
        console.print("\n[red]Setup interrupted; the project may be incomplete.[/red]")
        sys.exit(EXIT_INTERRUPTED)


if __name__ == "__main__":
    main()
