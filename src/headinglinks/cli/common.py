"""Helpers shared by the headinglinks CLI commands."""

import sys
from collections.abc import Callable, Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TypeVar

import click

from headinglinks.lib.errors import ConfigError, FileNotFoundError, HeadingLinksError
from headinglinks.lib.logging_config import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def verbosity_options(func: F) -> F:
    """Add the shared ``--verbose`` / ``--quiet`` flags to a command."""
    func = click.option(
        "--quiet",
        "-q",
        is_flag=True,
        help="Only log warnings and errors",
    )(func)
    func = click.option(
        "--verbose",
        "-v",
        is_flag=True,
        help="Enable verbose debug logging",
    )(func)
    return func


@contextmanager
def handle_cli_errors() -> Generator[None, None, None]:
    """Context manager for consistent error handling in CLI commands.

    Exit codes:
        2: Configuration or input error
        3: Unexpected error
    """
    try:
        yield
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        click.secho("Error: Configuration error", fg="red", err=True)
        click.echo(f"  {e.message}", err=True)
        sys.exit(2)
    except HeadingLinksError as e:
        logger.error(f"Input error: {e}")
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(2)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(3)


def read_document(document: str) -> str:
    """Read document markup from a path, or stdin when the path is ``-``."""
    if document == "-":
        return click.get_text_stream("stdin").read()
    try:
        return Path(document).read_text(encoding="utf-8")
    except OSError as e:
        raise FileNotFoundError(document, "Document could not be read.") from e


def write_output(content: str, output: str | None) -> None:
    """Write command output to a file, or stdout when no file is given."""
    if output is None:
        click.echo(content)
        return
    Path(output).write_text(content, encoding="utf-8")
    logger.info(f"Wrote {len(content)} characters to {output}")
