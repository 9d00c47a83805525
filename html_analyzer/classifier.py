"""Line classification for the simplified markup grammar."""

from __future__ import annotations

from .constants import CLOSE_TAG_PATTERN, OPEN_TAG_PATTERN, TAG_PREFIX
from .models import ClassifiedLine, LineKind

INVALID_LINE = ClassifiedLine(LineKind.INVALID)


def classify_line(line: str) -> ClassifiedLine:
    """Classify one trimmed line as an open tag, close tag, text, or invalid.

    Lines starting with ``<`` must be exactly ``<name>`` or ``</name>``; any
    other bracket syntax (attributes, whitespace, ``<a/>``, names starting
    with a digit) is invalid. Lines not starting with ``<`` are text.

    Args:
        line: A trimmed input line.

    Returns:
        ClassifiedLine: The line's category and its tag name or text.

    Examples:
        classify_line("<div>")  # ClassifiedLine(LineKind.OPEN_TAG, "div")
        classify_line("hello")  # ClassifiedLine(LineKind.TEXT, "hello")
    """
    if not line.startswith(TAG_PREFIX):
        return ClassifiedLine(LineKind.TEXT, line)

    open_match = OPEN_TAG_PATTERN.fullmatch(line)
    if open_match:
        return ClassifiedLine(LineKind.OPEN_TAG, open_match.group(1))

    close_match = CLOSE_TAG_PATTERN.fullmatch(line)
    if close_match:
        return ClassifiedLine(LineKind.CLOSE_TAG, close_match.group(1))

    return INVALID_LINE
