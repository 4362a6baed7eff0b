"""
Closing fence search.

Scans line by line from the end of the opening fence for a closing
fence of the same dialect and comment prefix. The scan counts every
line it passes over, and gives up once the count or the byte total
exceeds the configured ScanLimits.
"""

from __future__ import annotations

from typing import Callable

from front_matter_scanner.models.fence import Dialect, FenceDescriptor
from front_matter_scanner.models.limits import DEFAULT_LIMITS, ScanLimits
from front_matter_scanner.models.search_result import FenceSearch, SearchOutcome
from front_matter_scanner.scanner.cursor import skip_to_next_line
from front_matter_scanner.scanner.fences import (
    is_pep723_body_line,
    is_pep723_closing,
    match_comment_fence_line,
    validate_fence,
)
from front_matter_scanner.utils.logging import get_logger

logger = get_logger(__name__)

LineCheck = Callable[[bytes, int], bool]


def closing_classifier(fence: FenceDescriptor) -> LineCheck:
	"""
	Return a predicate recognizing the closing fence line for a dialect.

	Parameters:
		fence: Descriptor of the opened block.

	Returns:
		Callable taking (buf, line_start) and returning True on a
		closing fence line.
	"""
	if fence.dialect is Dialect.TOML_PEP723:
		return is_pep723_closing
	glyph = fence.glyph_bytes
	if fence.is_comment_wrapped:
		prefix = fence.prefix
		return lambda buf, pos: match_comment_fence_line(
		    buf, pos, glyph, prefix) is not None
	return lambda buf, pos: validate_fence(buf, pos, glyph,
	                                       is_opening=False) is not None


def line_grammar(fence: FenceDescriptor) -> LineCheck | None:
	"""Return the per-line grammar check enforced inside a block, if any."""
	if fence.dialect is Dialect.TOML_PEP723:
		return is_pep723_body_line
	return None


def find_closing_fence(
    buf: bytes,
    start: int,
    fence: FenceDescriptor,
    limits: ScanLimits = DEFAULT_LIMITS,
) -> FenceSearch:
	"""
	Find the closing fence matching an opened block.

	Parameters:
		buf: Document bytes.
		start: Offset of the first line after the opening fence.
		fence: Descriptor of the opened block.
		limits: Line and byte ceilings for the scan.

	Returns:
		FenceSearch with outcome FOUND and the offset where the closing
		fence line starts, or the reason the search stopped.
	"""
	is_closing = closing_classifier(fence)
	check_line = line_grammar(fence)
	pos = start
	lines = 0
	scanned = 0
	while pos < len(buf):
		if is_closing(buf, pos):
			return FenceSearch(outcome=SearchOutcome.FOUND,
			                   offset=pos,
			                   lines_scanned=lines,
			                   bytes_scanned=scanned)
		if check_line is not None and not check_line(buf, pos):
			logger.debug("Invalid %s line at offset %d",
			             fence.fence_type.value, pos)
			return FenceSearch(outcome=SearchOutcome.INVALID_LINE,
			                   lines_scanned=lines,
			                   bytes_scanned=scanned)
		nxt = skip_to_next_line(buf, pos)
		lines += 1
		scanned += nxt - pos
		if lines > limits.max_lines or scanned > limits.max_bytes:
			logger.warning(
			    "Gave up looking for closing %s fence after %d lines "
			    "(%d bytes)", fence.fence_type.value, lines, scanned)
			return FenceSearch(outcome=SearchOutcome.LIMIT_EXCEEDED,
			                   lines_scanned=lines,
			                   bytes_scanned=scanned)
		pos = nxt
	logger.debug("No closing %s fence before end of input",
	             fence.fence_type.value)
	return FenceSearch(outcome=SearchOutcome.UNTERMINATED,
	                   lines_scanned=lines,
	                   bytes_scanned=scanned)


__all__ = [
    "closing_classifier",
    "line_grammar",
    "find_closing_fence",
]
