"""
Front matter extraction.

Entry points that split a document into its front matter block and
body. Dialects are tried in the order given by ``OPENING_MATCHERS``;
once one claims the opening line, its closing fence decides the result
and no other dialect is tried.
"""

from __future__ import annotations

import logging

from front_matter_scanner.models.limits import DEFAULT_LIMITS, ScanLimits
from front_matter_scanner.models.result import ExtractionResult
from front_matter_scanner.scanner.body import (
    trim_leading_comment_lines,
    trim_leading_empty_lines,
)
from front_matter_scanner.scanner.cursor import skip_to_next_line
from front_matter_scanner.scanner.dialects import match_opening
from front_matter_scanner.scanner.search import find_closing_fence
from front_matter_scanner.scanner.unwrap import unwrap_comments
from front_matter_scanner.utils.logging import get_logger, preview

logger = get_logger(__name__)

_ENCODING = "utf-8"
_ERRORS = "surrogatepass"


def _decode(data: bytes) -> str:
	return data.decode(_ENCODING, _ERRORS)


def extract_front_matter(text: str,
                         limits: ScanLimits | None = None) -> ExtractionResult:
	"""
	Split leading front matter from a document.

	Recognizes YAML (``---``) and TOML (``+++``) fences, their ``# ``
	and ``#' `` comment-wrapped forms and ``# /// script`` metadata
	blocks. Content is returned with fences and comment prefixes
	removed; the content is never parsed.

	Parameters:
		text: Full document text.
		limits: Ceilings for the closing fence search. Defaults to
			10,000 lines / 1 MiB.

	Returns:
		ExtractionResult; when nothing is found, ``body`` is ``text``
		unchanged.

	Raises:
		TypeError: If text is not a str.
		ValueError: If a block is found in text holding lone surrogates;
			text without front matter is returned unchanged.
	"""
	if not isinstance(text, str):
		raise TypeError(f"text must be str, not {type(text).__name__}")
	buf = text.encode(_ENCODING, _ERRORS)

	opening = match_opening(buf)
	if opening is None:
		if logger.isEnabledFor(logging.DEBUG):
			logger.debug("No opening fence in %s", preview(buf))
		return ExtractionResult.not_found(text)

	fence = opening.fence
	search = find_closing_fence(buf, opening.content_start, fence,
	                            limits or DEFAULT_LIMITS)
	if not search.found:
		return ExtractionResult.not_found(text)

	content = buf[opening.content_start:search.offset]
	body = buf[skip_to_next_line(buf, search.offset):]
	if fence.is_comment_wrapped:
		content = unwrap_comments(content, fence.prefix)
		body = trim_leading_comment_lines(body, fence.prefix)
	else:
		body = trim_leading_empty_lines(body)

	return ExtractionResult(
	    found=True,
	    format=fence.format,
	    fence_type=fence.fence_type,
	    content=_decode(content),
	    body=_decode(body),
	)


def has_front_matter(text: str, limits: ScanLimits | None = None) -> bool:
	"""Return True if text starts with a complete front matter block."""
	return extract_front_matter(text, limits).found


def strip_front_matter(text: str, limits: ScanLimits | None = None) -> str:
	"""
	Remove front matter from text, returning only the body.

	Text without front matter is returned unchanged.
	"""
	return extract_front_matter(text, limits).body


__all__ = [
    "extract_front_matter",
    "has_front_matter",
    "strip_front_matter",
]
