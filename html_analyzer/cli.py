"""
Prints the deepest text line of a simplified HTML document fetched from a URL.
Prints "malformed HTML" for broken nesting and "URL connection error" when the
document cannot be fetched.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import click
from .config import ConfigError, build_config
from .constants import OUTPUT_URL_ERROR
from .logging_config import setup_logger
from .report import analyze_location
from .source import get_timeout

__all__ = ["cli"]


@click.command()
@click.version_option(package_name="html-analyzer")
@click.option("--timeout", type=float, help="Network timeout in seconds")
@click.option("--user-agent", help="User-Agent header sent with HTTP requests")
@click.option(
    "--follow-redirects/--no-follow-redirects",
    default=None,
    help="Follow HTTP redirects",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
@click.argument("urls", nargs=-1, metavar="URL")
def cli(
    urls: tuple[str, ...],
    timeout: float | None = None,
    user_agent: str | None = None,
    follow_redirects: bool | None = None,
    verbose: bool = False,
):
    """
    Entry point for analyzing a document.

    Args:
        urls: Command-line arguments; exactly one URL is expected.
        timeout: Override for the network timeout.
        user_agent: Override for the User-Agent header.
        follow_redirects: Override for redirect handling.
        verbose: Enable debug logging on stderr.

    Returns:
        None.

    Raises:
        click.BadParameter: If the configuration or overrides are invalid.
        click.ClickException: If `HTML_ANALYZER_TIMEOUT` is not a positive number.

    Examples:
        html-analyzer http://example.com/page.html
    """
    setup_logger(level=logging.DEBUG if verbose else logging.WARNING)

    if len(urls) != 1:
        click.echo(OUTPUT_URL_ERROR)
        return

    try:
        config = build_config(
            Path.cwd(),
            timeout=timeout,
            user_agent=user_agent,
            follow_redirects=follow_redirects,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    if timeout is None:
        try:
            config = replace(config, timeout=get_timeout(default=config.timeout))
        except ValueError as error:
            raise click.ClickException(str(error)) from error

    click.echo(analyze_location(urls[0], config))


if __name__ == "__main__":
    cli()
