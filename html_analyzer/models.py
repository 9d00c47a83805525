"""Data models for html-analyzer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class LineKind(Enum):
    """Categories a trimmed input line can fall into.

    Attributes:
        OPEN_TAG: A line of the form ``<name>``.
        CLOSE_TAG: A line of the form ``</name>``.
        TEXT: Any line that does not start with ``<``.
        INVALID: A line starting with ``<`` that is not a valid tag.
    """

    OPEN_TAG = auto()
    CLOSE_TAG = auto()
    TEXT = auto()
    INVALID = auto()


class Violation(Enum):
    """Structural violations that end a run.

    Attributes:
        UNMATCHED_CLOSE: Closing tag with no open element.
        MISMATCHED_CLOSE: Closing tag whose name differs from the innermost open tag.
        TEXT_OUTSIDE_ELEMENT: Text line with no enclosing element.
        INVALID_LINE: Line starting with ``<`` that is not a valid tag.
        UNCLOSED_TAG: Input ended with elements still open.
    """

    UNMATCHED_CLOSE = auto()
    MISMATCHED_CLOSE = auto()
    TEXT_OUTSIDE_ELEMENT = auto()
    INVALID_LINE = auto()
    UNCLOSED_TAG = auto()


@dataclass(frozen=True)
class ClassifiedLine:
    """A single classified input line.

    Attributes:
        kind: Category of the line.
        value: Tag name for tags, the full line for text, None for invalid lines.
    """

    kind: LineKind
    value: str | None = None


@dataclass
class NestingState:
    """Mutable parser state for one run.

    Attributes:
        stack: Names of open elements, outermost first.
        max_depth: Greatest depth at which text was seen, or None before any text.
        deepest_text: Text recorded at `max_depth`, or None before any text.
        violation: First structural violation, or None while the input is valid.
        violation_line: One-based line number of the violation, if any.
    """

    stack: list[str] = field(default_factory=list)
    max_depth: int | None = None
    deepest_text: str | None = None
    violation: Violation | None = None
    violation_line: int | None = None

    @property
    def malformed(self) -> bool:
        return self.violation is not None


@dataclass(frozen=True)
class ParseOutcome:
    """Final result of a run.

    Attributes:
        malformed: True when a structural violation was detected.
        deepest_text: First text line at the greatest depth, or None when no
            text was accepted.
        max_depth: Depth of `deepest_text`, or None.
        violation: Kind of the violation when `malformed` is True.
        line_number: One-based position, among non-empty lines, where the
            violation was detected. For unclosed tags this is the number of
            lines read.
    """

    malformed: bool
    deepest_text: str | None
    max_depth: int | None = None
    violation: Violation | None = None
    line_number: int | None = None

    @property
    def reports_malformed(self) -> bool:
        """Whether the run is reported as malformed.

        A well-nested document without any text line is reported the same way
        as a structurally broken one.
        """
        return self.malformed or self.deepest_text is None
