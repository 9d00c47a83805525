"""Nesting validation and deepest-text extraction."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .classifier import classify_line
from .models import ClassifiedLine, LineKind, NestingState, ParseOutcome, Violation
from .source import split_lines, trimmed_lines

logger = logging.getLogger(__name__)


def _mark_malformed(state: NestingState, violation: Violation, line_number: int) -> None:
    state.violation = violation
    state.violation_line = line_number


def _try_close_tag(state: NestingState, name: str) -> Violation | None:
    """Pop the innermost open element and check it against `name`.

    Only the top of the stack is compared; a matching name further down does
    not make the close valid.

    Args:
        state: Current parser state.
        name: Name from the closing tag.

    Returns:
        Violation | None: The violation found, or None when the close matched.
    """
    if not state.stack:
        return Violation.UNMATCHED_CLOSE

    if state.stack.pop() != name:
        return Violation.MISMATCHED_CLOSE

    return None


def _try_record_text(state: NestingState, content: str) -> Violation | None:
    """Record `content` when it sits deeper than any text seen so far.

    Depth is the number of open elements, so text directly inside the
    outermost element has depth 1. Ties keep the earlier line.

    Args:
        state: Current parser state.
        content: Text line content.

    Returns:
        Violation | None: TEXT_OUTSIDE_ELEMENT when no element is open,
            otherwise None.
    """
    if not state.stack:
        return Violation.TEXT_OUTSIDE_ELEMENT

    depth = len(state.stack)
    if state.max_depth is None or depth > state.max_depth:
        state.max_depth = depth
        state.deepest_text = content

    return None


def _apply_line(state: NestingState, classified: ClassifiedLine, line_number: int) -> None:
    if classified.kind is LineKind.OPEN_TAG:
        state.stack.append(classified.value)
        return

    if classified.kind is LineKind.CLOSE_TAG:
        violation = _try_close_tag(state, classified.value)
    elif classified.kind is LineKind.TEXT:
        violation = _try_record_text(state, classified.value)
    else:
        violation = Violation.INVALID_LINE

    if violation is not None:
        _mark_malformed(state, violation, line_number)


def analyze_lines(lines: Iterable[str]) -> ParseOutcome:
    """Validate nesting and find the deepest text line.

    Consumes `lines` in a single forward pass and stops pulling lines at the
    first violation. Elements still open at the end of input are a violation
    too. Malformed input never raises; it is reported on the outcome.

    Args:
        lines: Trimmed, non-empty lines in document order.

    Returns:
        ParseOutcome: Whether the input is malformed and the first text line
            found at the greatest depth.

    Examples:
        analyze_lines(["<a>", "x", "<b>", "y", "</b>", "</a>"]).deepest_text  # "y"
    """
    state = NestingState()
    line_number = 0

    for line_number, line in enumerate(lines, start=1):
        _apply_line(state, classify_line(line), line_number)
        if state.malformed:
            break

    if not state.malformed and state.stack:
        _mark_malformed(state, Violation.UNCLOSED_TAG, line_number)

    if state.malformed:
        logger.debug(
            "Malformed input at line %d: %s", state.violation_line, state.violation.name
        )
    elif state.deepest_text is None:
        logger.debug("No text line found inside any element")

    return ParseOutcome(
        malformed=state.malformed,
        deepest_text=state.deepest_text,
        max_depth=state.max_depth,
        violation=state.violation,
        line_number=state.violation_line,
    )


def parse_html(content: str) -> ParseOutcome:
    """Analyze an in-memory document.

    Splits `content` on CRLF, CR and LF only, trims the lines, and drops
    empty lines before running `analyze_lines`.

    Args:
        content: Document text.

    Returns:
        ParseOutcome: Result of the run.

    Examples:
        parse_html("<p>\\n  hello\\n</p>\\n").deepest_text  # "hello"
    """
    return analyze_lines(trimmed_lines(split_lines([content])))
