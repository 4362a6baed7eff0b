"""
Cursor primitives over an immutable byte buffer.

Every function takes the buffer and a byte offset and returns a new
offset or a flag; nothing here keeps state. Lines end with LF or CRLF.
A lone CR is ordinary content.
"""

from __future__ import annotations

from typing import Iterator

LF = 0x0A
CR = 0x0D
SPACE = 0x20
TAB = 0x09


def is_whitespace(c: int) -> bool:
	"""Return True for space or tab only."""
	return c == SPACE or c == TAB


def is_newline(buf: bytes, pos: int) -> bool:
	"""Return True if a line terminator (LF or CRLF) starts at pos."""
	if pos >= len(buf):
		return False
	if buf[pos] == LF:
		return True
	return buf[pos] == CR and pos + 1 < len(buf) and buf[pos + 1] == LF


def skip_to_next_line(buf: bytes, pos: int) -> int:
	"""
	Advance past the next line terminator.

	Parameters:
		buf: Document bytes.
		pos: Offset anywhere inside a line.

	Returns:
		Offset of the following line, or len(buf) when no terminator
		remains.
	"""
	nl = buf.find(b"\n", pos)
	if nl == -1:
		return len(buf)
	return nl + 1


def skip_whitespace(buf: bytes, pos: int) -> int:
	"""Return the first offset at or after pos that is not space/tab."""
	n = len(buf)
	while pos < n and is_whitespace(buf[pos]):
		pos += 1
	return pos


def rest_is_blank(buf: bytes, pos: int) -> bool:
	"""Return True if only spaces/tabs remain before end of line or EOF."""
	end = skip_whitespace(buf, pos)
	return end >= len(buf) or is_newline(buf, end)


def at_line_start(buf: bytes, pos: int) -> bool:
	"""Return True if pos is 0 or directly follows a line terminator."""
	return pos == 0 or (pos <= len(buf) and buf[pos - 1] == LF)


def iter_lines(buf: bytes, start: int = 0) -> Iterator[tuple[int, int]]:
	"""
	Iterate over lines from start to the end of the buffer.

	Yields:
		(line_start, next_line_start) pairs; the slice between them
		includes the line terminator.
	"""
	pos = start
	n = len(buf)
	while pos < n:
		nxt = skip_to_next_line(buf, pos)
		yield pos, nxt
		pos = nxt


__all__ = [
    "is_whitespace",
    "is_newline",
    "skip_to_next_line",
    "skip_whitespace",
    "rest_is_blank",
    "at_line_start",
    "iter_lines",
]
