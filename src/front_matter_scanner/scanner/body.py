"""
Body trimming.

Decides where the body starts after the closing fence. Leading blank
lines are always separator noise; for comment-wrapped dialects so are
bare comment marker lines, and a body that runs on directly from the
block without a blank line is unwrapped like the block itself.
"""

from __future__ import annotations

from front_matter_scanner.models.fence import CommentPrefix
from front_matter_scanner.scanner.cursor import (
    iter_lines,
    rest_is_blank,
    skip_whitespace,
)
from front_matter_scanner.scanner.unwrap import (
    is_bare_comment_line,
    unwrap_comments,
)


def trim_leading_empty_lines(body: bytes) -> bytes:
	"""
	Drop leading empty or whitespace-only lines.

	Returns:
		The body from its first non-blank line, unmodified, or b"".
	"""
	for start, _ in iter_lines(body):
		if not rest_is_blank(body, start):
			return body[start:]
	return b""


def trim_leading_comment_lines(body: bytes, prefix: CommentPrefix) -> bytes:
	"""
	Drop leading blank and bare comment marker lines.

	If a blank line was skipped, the rest of the body is returned as
	is. If the first content line follows the fence directly (only bare
	marker lines in between), the rest of the body is still part of the
	comment and gets unwrapped with the same prefix, starting at the
	first non-blank byte of that line.

	Parameters:
		body: Text following the closing fence line.
		prefix: Comment prefix of the block.

	Returns:
		Trimmed (and possibly unwrapped) body, or b"".
	"""
	had_blank_line = False
	for start, _ in iter_lines(body):
		if rest_is_blank(body, start):
			had_blank_line = True
			continue
		if is_bare_comment_line(body, skip_whitespace(body, start), prefix):
			continue
		if had_blank_line:
			return body[start:]
		return unwrap_comments(body[skip_whitespace(body, start):], prefix)
	return b""


__all__ = ["trim_leading_empty_lines", "trim_leading_comment_lines"]
