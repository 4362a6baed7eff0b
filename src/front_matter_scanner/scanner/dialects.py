"""
Opening fence matchers.

Each matcher inspects offset 0 of a document and either claims it for
one dialect, returning the fence descriptor and the offset where the
block content starts, or returns None. ``OPENING_MATCHERS`` lists them
in priority order; the first claim wins.
"""

from __future__ import annotations

from typing import Callable, NamedTuple

from front_matter_scanner.models.fence import (
    PEP723_FENCE,
    Dialect,
    FenceDescriptor,
)
from front_matter_scanner.scanner.cursor import skip_to_next_line
from front_matter_scanner.scanner.fences import (
    TOML_GLYPH,
    YAML_GLYPH,
    check_comment_fence,
    is_pep723_opening,
    match_comment_fence_line,
    validate_fence,
)


class OpeningMatch(NamedTuple):
	"""A recognized opening fence."""

	fence: FenceDescriptor
	content_start: int


OpeningMatcher = Callable[[bytes], "OpeningMatch | None"]


def match_pep723_opening(buf: bytes) -> OpeningMatch | None:
	"""Match a ``# /// script`` opening line."""
	if not is_pep723_opening(buf, 0):
		return None
	return OpeningMatch(PEP723_FENCE, skip_to_next_line(buf, 0))


def comment_fence_matcher(dialect: Dialect, glyph: bytes) -> OpeningMatcher:
	"""Build a matcher for a ``# `` / ``#' `` wrapped fence."""

	def match(buf: bytes) -> OpeningMatch | None:
		found = check_comment_fence(buf, 0, glyph)
		if found is None:
			return None
		content_start = match_comment_fence_line(buf, 0, glyph, found.prefix)
		if content_start is None:
			return None
		fence = FenceDescriptor(dialect=dialect,
		                        glyph=glyph.decode("ascii"),
		                        prefix=found.prefix)
		return OpeningMatch(fence, content_start)

	return match


def bare_fence_matcher(dialect: Dialect, glyph: bytes) -> OpeningMatcher:
	"""Build a matcher for an unwrapped ``---`` / ``+++`` fence."""
	fence = FenceDescriptor(dialect=dialect, glyph=glyph.decode("ascii"))

	def match(buf: bytes) -> OpeningMatch | None:
		content_start = validate_fence(buf, 0, glyph, is_opening=True)
		if content_start is None:
			return None
		return OpeningMatch(fence, content_start)

	return match


OPENING_MATCHERS: tuple[OpeningMatcher, ...] = (
    match_pep723_opening,
    comment_fence_matcher(Dialect.YAML, YAML_GLYPH),
    comment_fence_matcher(Dialect.TOML, TOML_GLYPH),
    bare_fence_matcher(Dialect.YAML, YAML_GLYPH),
    bare_fence_matcher(Dialect.TOML, TOML_GLYPH),
)


def match_opening(buf: bytes) -> OpeningMatch | None:
	"""
	Return the first dialect whose opening fence matches offset 0.

	Parameters:
		buf: Document bytes.

	Returns:
		OpeningMatch for the winning dialect, or None.
	"""
	for matcher in OPENING_MATCHERS:
		opening = matcher(buf)
		if opening is not None:
			return opening
	return None


__all__ = [
    "OpeningMatch",
    "OpeningMatcher",
    "OPENING_MATCHERS",
    "match_opening",
    "match_pep723_opening",
    "comment_fence_matcher",
    "bare_fence_matcher",
]
