from front_matter_scanner.models.fence import CommentPrefix
from front_matter_scanner.scanner.unwrap import (
    is_bare_comment_line,
    unwrap_comments,
)

HASH = CommentPrefix.HASH
ROXYGEN = CommentPrefix.ROXYGEN


class TestUnwrapComments:
	"""Tests for unwrap_comments()."""

	def test_hash_prefix(self):
		assert unwrap_comments(b"# a: 1\n# b: 2\n", HASH) == b"a: 1\nb: 2\n"

	def test_roxygen_prefix_crlf(self):
		assert unwrap_comments(b"#' a\r\n#' b\r\n", ROXYGEN) == b"a\r\nb\r\n"

	def test_last_line_without_terminator(self):
		assert unwrap_comments(b"# a\n# b", HASH) == b"a\nb"

	def test_bare_hash_lines_dropped(self):
		assert unwrap_comments(b"# a\n#\n#\t\n# b\n", HASH) == b"a\nb\n"

	def test_prefix_then_whitespace_is_stripped_not_dropped(self):
		assert unwrap_comments(b"# a\n#  \t\n# b\n", HASH) == b"a\n \t\nb\n"

	def test_bare_roxygen_lines_dropped(self):
		assert unwrap_comments(b"#' a\n#'\n#' b", ROXYGEN) == b"a\nb"

	def test_prefix_only_line_keeps_blank(self):
		"""A line that is exactly the prefix unwraps to an empty line."""
		assert unwrap_comments(b"# a\n# \n# b\n", HASH) == b"a\n\nb\n"

	def test_bare_hash_with_roxygen_prefix_is_copied(self):
		assert unwrap_comments(b"#' a\n#\n", ROXYGEN) == b"a\n#\n"

	def test_other_lines_copied_verbatim(self):
		assert unwrap_comments(b"# a\nplain\n", HASH) == b"a\nplain\n"

	def test_indentation_after_prefix_kept(self):
		assert unwrap_comments(b"# a:\n#   - b\n", HASH) == b"a:\n  - b\n"

	def test_empty(self):
		assert unwrap_comments(b"", HASH) == b""


def test_is_bare_comment_line():
	assert is_bare_comment_line(b"#\n", 0, HASH)
	assert is_bare_comment_line(b"#\t\r\n", 0, HASH)
	assert is_bare_comment_line(b"#", 0, HASH)
	assert is_bare_comment_line(b"#' \n", 0, ROXYGEN)
	assert not is_bare_comment_line(b"#'\n", 0, HASH)
	assert not is_bare_comment_line(b"# x\n", 0, HASH)
	assert not is_bare_comment_line(b"#\n", 0, ROXYGEN)
