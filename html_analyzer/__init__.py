"""
html-analyzer: nesting validator and deepest-text finder for simplified HTML.

Documents contain one tag or one text fragment per line. The analyzer reports
the first text line found at the greatest nesting depth, or flags the document
as malformed.

CLI Usage:
    html-analyzer http://example.com/page.html

Library Usage:
    from html_analyzer import parse_html, render_outcome

    outcome = parse_html("<html>\\n<body>\\nHello\\n</body>\\n</html>\\n")
    print(render_outcome(outcome))  # Hello
"""

from .classifier import classify_line
from .config import AnalyzerConfig, ConfigError
from .exceptions import SourceError
from .models import ClassifiedLine, LineKind, ParseOutcome, Violation
from .parser import analyze_lines, parse_html
from .report import analyze_location, render_outcome
from .source import open_source

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "classify_line",
    "analyze_lines",
    "parse_html",
    # Line source and result surface
    "open_source",
    "analyze_location",
    "render_outcome",
    # Data models
    "ClassifiedLine",
    "LineKind",
    "ParseOutcome",
    "Violation",
    # Configuration
    "AnalyzerConfig",
    # Exceptions
    "ConfigError",
    "SourceError",
    # Version
    "__version__",
]
