"""Constants used across the html-analyzer package."""

from __future__ import annotations

import re

# Tag grammar: one ASCII letter followed by letters or digits, nothing else.
TAG_NAME = r"[A-Za-z][A-Za-z0-9]*"
OPEN_TAG_PATTERN = re.compile(rf"<({TAG_NAME})>")
CLOSE_TAG_PATTERN = re.compile(rf"</({TAG_NAME})>")
TAG_PREFIX = "<"

# Result surface
OUTPUT_MALFORMED = "malformed HTML"
OUTPUT_URL_ERROR = "URL connection error"

# Line source
HTTP_SCHEMES = ("http", "https")
FILE_SCHEME = "file"
SOURCE_ENCODING = "UTF-8"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "html-analyzer"

# Line boundaries and trimming match a plain reader: only CR, LF and CRLF end a
# line, and only control characters and space (U+0000 to U+0020) are trimmed.
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")
TRIM_CHARS = "".join(map(chr, range(0x21)))
