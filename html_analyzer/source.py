"""Line sources for html-analyzer."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO
from urllib.parse import urlsplit
from urllib.request import url2pathname

import httpx

from .config import AnalyzerConfig
from .constants import (
    DEFAULT_TIMEOUT,
    FILE_SCHEME,
    HTTP_SCHEMES,
    LINE_BREAK_PATTERN,
    SOURCE_ENCODING,
    TRIM_CHARS,
)
from .exceptions import SourceError

logger = logging.getLogger(__name__)

TIMEOUT_ENV_VAR = "HTML_ANALYZER_TIMEOUT"
READ_CHUNK_SIZE = 64 * 1024


def get_timeout(default: float = DEFAULT_TIMEOUT) -> float:
    """Resolve the network timeout.

    Args:
        default: Fallback value in seconds when the environment variable is unset.

    Returns:
        float: Timeout in seconds.

    Raises:
        ValueError: If the environment value is not a positive number.

    Examples:
        os.environ["HTML_ANALYZER_TIMEOUT"] = "2.5"
        timeout = get_timeout(default=10.0)
    """
    env_value = os.environ.get(TIMEOUT_ENV_VAR)
    if env_value is None:
        return default

    try:
        timeout = float(env_value)
    except ValueError as error:
        error_message = f"Invalid value for {TIMEOUT_ENV_VAR}: {env_value} (expected positive number)"
        raise ValueError(error_message) from error

    if not timeout > 0:
        error_message = f"{TIMEOUT_ENV_VAR} must be a positive number, got {env_value}."
        raise ValueError(error_message)

    return timeout


def split_lines(chunks: Iterable[str]) -> Iterator[str]:
    """Split a stream of text chunks into lines.

    Only CRLF, CR and LF end a line. A chunk ending in CR is held back until
    the next chunk shows whether the CR starts a CRLF pair.

    Args:
        chunks: Decoded text in arbitrary pieces.

    Yields:
        str: Lines without their line endings.
    """
    pending = ""
    for chunk in chunks:
        pending += chunk
        held_cr = pending.endswith("\r")
        *lines, pending = LINE_BREAK_PATTERN.split(pending[:-1] if held_cr else pending)
        if held_cr:
            pending += "\r"
        yield from lines

    if pending:
        yield pending.removesuffix("\r")


def trimmed_lines(raw_lines: Iterable[str]) -> Iterator[str]:
    """Trim surrounding whitespace from each line and drop empty lines.

    Only control characters and spaces are trimmed; other Unicode whitespace
    such as U+00A0 is kept as content.

    Args:
        raw_lines: Lines as read from the source, with or without line endings.

    Yields:
        str: Non-empty trimmed lines, lazily and in order.
    """
    for raw_line in raw_lines:
        line = raw_line.strip(TRIM_CHARS)
        if line:
            yield line


def safe_read(location: str, filepath: Path) -> TextIO:
    """Open a local file for reading with consistent error handling.

    Undecodable bytes are replaced rather than rejected.

    Args:
        location: URL the path was derived from, used in error messages.
        filepath: Path to the file.

    Returns:
        TextIO: File handle opened for reading in UTF-8.

    Raises:
        SourceError: If the path is missing, inaccessible, not a file, or contains
            a NUL character.
    """
    try:
        return open(filepath, "r", encoding=SOURCE_ENCODING, errors="replace", newline="")
    except (OSError, ValueError) as error:
        raise SourceError(location, str(error)) from error


def _iter_file_lines(location: str, handle: TextIO) -> Iterator[str]:
    try:
        yield from split_lines(iter(lambda: handle.read(READ_CHUNK_SIZE), ""))
    except OSError as error:
        raise SourceError(location, str(error)) from error


def _iter_response_lines(location: str, response: httpx.Response) -> Iterator[str]:
    try:
        yield from split_lines(response.iter_text())
    except httpx.HTTPError as error:
        raise SourceError(location, str(error)) from error


def _build_client(config: AnalyzerConfig) -> httpx.Client:
    return httpx.Client(
        timeout=config.timeout,
        follow_redirects=config.follow_redirects,
        headers={"User-Agent": config.user_agent},
    )


@contextmanager
def _open_file(location: str) -> Iterator[Iterator[str]]:
    filepath = Path(url2pathname(urlsplit(location).path))
    with safe_read(location, filepath) as handle:
        yield _iter_file_lines(location, handle)


@contextmanager
def _open_http(
    location: str, config: AnalyzerConfig, client: httpx.Client | None
) -> Iterator[Iterator[str]]:
    owns_client = client is None
    if owns_client:
        client = _build_client(config)

    try:
        try:
            response = client.send(client.build_request("GET", location), stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as error:
            raise SourceError(location, str(error)) from error

        try:
            if response.is_error:
                raise SourceError(location, f"HTTP status {response.status_code}")
            response.encoding = SOURCE_ENCODING
            yield _iter_response_lines(location, response)
        finally:
            response.close()
    finally:
        if owns_client:
            client.close()


@contextmanager
def open_source(
    location: str,
    config: AnalyzerConfig | None = None,
    client: httpx.Client | None = None,
) -> Iterator[Iterator[str]]:
    """Open a URL and expose its content as trimmed, non-empty lines.

    The connection or file is established before the context is entered, so a
    source that cannot be opened fails before any line is produced. Failures
    while reading lines are raised from the iterator.

    Args:
        location: ``http``, ``https`` or ``file`` URL.
        config: Network settings; defaults to a new `AnalyzerConfig`.
        client: Optional preconfigured HTTP client. When omitted a client is
            built from `config` and closed on exit.

    Yields:
        Iterator[str]: Lazy, single-pass iterator over the document's lines.

    Raises:
        SourceError: If the URL is invalid or uses an unsupported scheme, or the
            resource cannot be opened or read.

    Examples:
        with open_source("https://example.com/") as lines:
            outcome = analyze_lines(lines)
    """
    config = config or AnalyzerConfig()

    try:
        scheme = urlsplit(location).scheme.lower()
    except ValueError as error:
        raise SourceError(location, str(error)) from error

    if scheme in HTTP_SCHEMES:
        logger.info("Fetching %s", location)
        opener = _open_http(location, config, client)
    elif scheme == FILE_SCHEME:
        logger.info("Reading %s", location)
        opener = _open_file(location)
    elif not scheme:
        raise SourceError(location, "no URL scheme")
    else:
        raise SourceError(location, f"unsupported URL scheme {scheme!r}")

    with opener as raw_lines:
        yield trimmed_lines(raw_lines)
