"""Front matter scanning.

This subpackage implements the fence scanner that splits a leading
metadata block from a document. It works on the UTF-8 bytes of the
input and never parses the captured content.

Key modules:
    - cursor: Line ending and whitespace primitives
    - fences: Opening/closing fence classifiers per dialect
    - dialects: Ordered opening fence matchers
    - search: Closing fence search with scan ceilings
    - unwrap: Comment prefix removal
    - body: Leading separator trimming for the body
    - extract: extract_front_matter() and helpers
"""

from .dialects import OpeningMatch, OPENING_MATCHERS, match_opening
from .search import find_closing_fence
from .unwrap import unwrap_comments
from .body import trim_leading_comment_lines, trim_leading_empty_lines
from .extract import extract_front_matter, has_front_matter, strip_front_matter

__all__ = [
    "OpeningMatch",
    "OPENING_MATCHERS",
    "match_opening",
    "find_closing_fence",
    "unwrap_comments",
    "trim_leading_comment_lines",
    "trim_leading_empty_lines",
    "extract_front_matter",
    "has_front_matter",
    "strip_front_matter",
]
