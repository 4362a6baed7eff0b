"""
Comment prefix unwrapping.

Turns a block of comment lines back into plain text by removing the
comment prefix from every line.
"""

from __future__ import annotations

from front_matter_scanner.models.fence import CommentPrefix
from front_matter_scanner.scanner.cursor import iter_lines, rest_is_blank


def is_bare_comment_line(buf: bytes, pos: int, prefix: CommentPrefix) -> bool:
	"""
	Check for a line holding only the comment marker.

	For the ``"# "`` prefix the marker is ``#``; for ``"#' "`` it is
	``#'``. Trailing spaces or tabs are allowed.
	"""
	marker = prefix.marker
	return buf.startswith(marker, pos) and rest_is_blank(
	    buf, pos + len(marker))


def unwrap_comments(block: bytes, prefix: CommentPrefix) -> bytes:
	"""
	Strip a comment prefix from every line of a block.

	Lines starting with the exact prefix lose it; bare marker lines are
	dropped; anything else is copied as is. Line terminators are kept.

	Parameters:
		block: Captured comment lines.
		prefix: Comment prefix to remove.

	Returns:
		Unwrapped bytes.
	"""
	raw = prefix.raw
	out = bytearray()
	for start, nxt in iter_lines(block):
		if block.startswith(raw, start):
			out += block[start + len(raw):nxt]
		elif is_bare_comment_line(block, start, prefix):
			continue
		else:
			out += block[start:nxt]
	return bytes(out)


__all__ = ["is_bare_comment_line", "unwrap_comments"]
