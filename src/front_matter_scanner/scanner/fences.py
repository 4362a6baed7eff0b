"""
Fence line classifiers.

Recognize opening and closing fence lines for each dialect:

    ---            bare YAML
    +++            bare TOML
    # --- / #' --- comment-wrapped YAML (hash / roxygen prefix)
    # +++ / #' +++ comment-wrapped TOML (hash / roxygen prefix)
    # /// script   script metadata opening, closed by "# ///"

A fence line is the delimiter followed only by spaces or tabs up to the
end of the line or the end of the buffer.
"""

from __future__ import annotations

from typing import NamedTuple

from front_matter_scanner.models.fence import CommentPrefix
from front_matter_scanner.scanner.cursor import (
    CR,
    LF,
    SPACE,
    at_line_start,
    is_newline,
    rest_is_blank,
    skip_to_next_line,
    skip_whitespace,
)

YAML_GLYPH = b"---"
TOML_GLYPH = b"+++"
PEP723_OPENING = b"# /// script"
PEP723_CLOSING = b"# ///"
HASH = 0x23

_COMMENT_PREFIXES = (CommentPrefix.HASH, CommentPrefix.ROXYGEN)


class CommentFence(NamedTuple):
	"""A comment prefix and glyph matched at some offset."""

	prefix: CommentPrefix
	length: int


def _end_of_fence_line(buf: bytes, pos: int) -> int | None:
	"""Return the next line offset if only blanks follow pos, else None."""
	end = skip_whitespace(buf, pos)
	if end >= len(buf):
		return end
	if not is_newline(buf, end):
		return None
	return skip_to_next_line(buf, end)


def validate_fence(buf: bytes, pos: int, glyph: bytes,
                   is_opening: bool) -> int | None:
	"""
	Validate a bare fence line at pos.

	An opening fence must sit at offset 0; a closing fence must sit at
	the start of a line.

	Parameters:
		buf: Document bytes.
		pos: Candidate fence offset.
		glyph: Three-byte fence glyph (b"---" or b"+++").
		is_opening: Whether an opening fence is expected.

	Returns:
		Offset just past the fence line terminator (or len(buf)), or
		None when the line is not a valid fence.
	"""
	if is_opening and pos != 0:
		return None
	if not is_opening and not at_line_start(buf, pos):
		return None
	if buf[pos:pos + 3] != glyph:
		return None
	return _end_of_fence_line(buf, pos + 3)


def check_comment_fence(buf: bytes, pos: int,
                        glyph: bytes) -> CommentFence | None:
	"""
	Recognize ``"# " + glyph`` or ``"#' " + glyph`` at pos.

	Only the delimiter itself is checked; trailing content is left to
	the caller.

	Returns:
		The matched prefix and total matched length, or None.
	"""
	for prefix in _COMMENT_PREFIXES:
		token = prefix.raw + glyph
		if buf.startswith(token, pos):
			return CommentFence(prefix, len(token))
	return None


def match_comment_fence_line(buf: bytes, pos: int, glyph: bytes,
                             prefix: CommentPrefix) -> int | None:
	"""
	Validate a complete comment-wrapped fence line with a given prefix.

	The prefix must match verbatim, so a ``# ---`` block never closes
	on ``#' ---``.

	Returns:
		Offset of the following line, or None.
	"""
	found = check_comment_fence(buf, pos, glyph)
	if found is None or found.prefix is not prefix:
		return None
	return _end_of_fence_line(buf, pos + found.length)


def is_pep723_opening(buf: bytes, pos: int) -> bool:
	"""Return True for an exact ``# /// script`` line at pos."""
	return buf.startswith(PEP723_OPENING, pos) and rest_is_blank(
	    buf, pos + len(PEP723_OPENING))


def is_pep723_closing(buf: bytes, pos: int) -> bool:
	"""Return True for an exact ``# ///`` line at pos."""
	return buf.startswith(PEP723_CLOSING, pos) and rest_is_blank(
	    buf, pos + len(PEP723_CLOSING))


def is_pep723_body_line(buf: bytes, pos: int) -> bool:
	"""
	Check the grammar of a line inside a script metadata block.

	The line must start with ``#``; anything directly after it must be
	a space or the line terminator.
	"""
	if pos >= len(buf) or buf[pos] != HASH:
		return False
	nxt = pos + 1
	return nxt >= len(buf) or buf[nxt] in (SPACE, LF, CR)


__all__ = [
    "YAML_GLYPH",
    "TOML_GLYPH",
    "PEP723_OPENING",
    "PEP723_CLOSING",
    "CommentFence",
    "validate_fence",
    "check_comment_fence",
    "match_comment_fence_line",
    "is_pep723_opening",
    "is_pep723_closing",
    "is_pep723_body_line",
]
