"""Rendering of analysis results."""

from __future__ import annotations

import logging

import httpx

from .config import AnalyzerConfig
from .constants import OUTPUT_MALFORMED, OUTPUT_URL_ERROR
from .exceptions import SourceError
from .models import ParseOutcome
from .parser import analyze_lines
from .source import open_source

logger = logging.getLogger(__name__)


def render_outcome(outcome: ParseOutcome) -> str:
    """Return the deepest text, or ``malformed HTML`` when there is none.

    Args:
        outcome: Result of a run.

    Returns:
        str: `outcome.deepest_text` verbatim, or ``malformed HTML`` when the
            input is malformed or contains no text line.
    """
    if outcome.reports_malformed:
        return OUTPUT_MALFORMED
    return outcome.deepest_text


def analyze_location(
    location: str,
    config: AnalyzerConfig | None = None,
    client: httpx.Client | None = None,
) -> str:
    """Fetch a document and render the analysis result.

    A source failure, whether it happens while connecting or while reading
    lines, is reported as ``URL connection error`` and takes precedence over
    any partial analysis.

    Args:
        location: URL of the document.
        config: Network settings; defaults to a new `AnalyzerConfig`.
        client: Optional preconfigured HTTP client.

    Returns:
        str: One of ``URL connection error``, ``malformed HTML``, or the
            deepest text line.

    Examples:
        analyze_location("https://example.com/page.html")
    """
    try:
        with open_source(location, config, client) as lines:
            outcome = analyze_lines(lines)
    except SourceError as error:
        logger.info("%s", error)
        return OUTPUT_URL_ERROR

    return render_outcome(outcome)
