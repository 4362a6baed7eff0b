import logging

from front_matter_scanner.models.fence import (
    PEP723_FENCE,
    CommentPrefix,
    Dialect,
    FenceDescriptor,
)
from front_matter_scanner.models.limits import ScanLimits
from front_matter_scanner.models.search_result import SearchOutcome
from front_matter_scanner.scanner.search import find_closing_fence

YAML = FenceDescriptor(dialect=Dialect.YAML, glyph="---")
TOML = FenceDescriptor(dialect=Dialect.TOML, glyph="+++")
YAML_COMMENT = FenceDescriptor(dialect=Dialect.YAML,
                               glyph="---",
                               prefix=CommentPrefix.HASH)


class TestBareFences:
	"""Closing fence search for unwrapped fences."""

	def test_closing_on_first_line(self):
		s = find_closing_fence(b"---\n---\n", 4, YAML)
		assert s.found
		assert s.offset == 4
		assert s.lines_scanned == 0

	def test_closing_after_content(self):
		s = find_closing_fence(b"---\na: 1\nb: 2\n---\nbody", 4, YAML)
		assert s.outcome is SearchOutcome.FOUND
		assert s.offset == 14
		assert s.lines_scanned == 2
		assert s.bytes_scanned == 10

	def test_unterminated(self):
		s = find_closing_fence(b"---\na: 1\n", 4, YAML)
		assert s.outcome is SearchOutcome.UNTERMINATED
		assert s.offset is None
		assert not s.found

	def test_closing_line_with_garbage_is_content(self):
		s = find_closing_fence(b"---\n--- x\n---\n", 4, YAML)
		assert s.offset == 10

	def test_other_glyph_is_content(self):
		s = find_closing_fence(b"+++\n---\n+++\n", 4, TOML)
		assert s.offset == 8

	def test_crlf(self):
		s = find_closing_fence(b"---\r\na: 1\r\n---\r\n", 5, YAML)
		assert s.offset == 11


class TestCommentFences:
	"""Closing fence search for comment-wrapped fences."""

	def test_prefix_must_match_verbatim(self):
		buf = b"# ---\n# a: 1\n#' ---\n# ---\n"
		s = find_closing_fence(buf, 6, YAML_COMMENT)
		assert s.offset == 20

	def test_bare_fence_does_not_close(self):
		s = find_closing_fence(b"# ---\n# a: 1\n---\n", 6, YAML_COMMENT)
		assert s.outcome is SearchOutcome.UNTERMINATED


class TestScriptMetadata:
	"""Closing fence search for ``# /// script`` blocks."""

	def test_found(self):
		buf = b"# /// script\n# a = 1\n#\n# ///\n"
		s = find_closing_fence(buf, 13, PEP723_FENCE)
		assert s.found
		assert s.offset == 23

	def test_uncommented_line_rejects_block(self):
		buf = b"# /// script\n# a = 1\nb = 2\n# ///\n"
		s = find_closing_fence(buf, 13, PEP723_FENCE)
		assert s.outcome is SearchOutcome.INVALID_LINE
		assert s.lines_scanned == 1

	def test_missing_space_rejects_block(self):
		buf = b"# /// script\n#a = 1\n# ///\n"
		s = find_closing_fence(buf, 13, PEP723_FENCE)
		assert s.outcome is SearchOutcome.INVALID_LINE
		assert s.lines_scanned == 0

	def test_blank_line_rejects_block(self):
		buf = b"# /// script\n\n# ///\n"
		s = find_closing_fence(buf, 13, PEP723_FENCE)
		assert s.outcome is SearchOutcome.INVALID_LINE

	def test_unterminated(self):
		buf = b"# /// script\n# a = 1\n"
		s = find_closing_fence(buf, 13, PEP723_FENCE)
		assert s.outcome is SearchOutcome.UNTERMINATED


class TestScanLimits:
	"""Line and byte ceilings."""

	def test_line_ceiling_is_inclusive(self):
		buf = b"---\n" + b"x\n" * 2 + b"---\n"
		s = find_closing_fence(buf, 4, YAML, ScanLimits(max_lines=2))
		assert s.found

	def test_line_ceiling_exceeded(self):
		buf = b"---\n" + b"x\n" * 3 + b"---\n"
		s = find_closing_fence(buf, 4, YAML, ScanLimits(max_lines=2))
		assert s.outcome is SearchOutcome.LIMIT_EXCEEDED
		assert s.lines_scanned == 3

	def test_byte_ceiling_is_inclusive(self):
		buf = b"---\naaa\n---\n"
		s = find_closing_fence(buf, 4, YAML, ScanLimits(max_bytes=4))
		assert s.found

	def test_byte_ceiling_exceeded(self):
		buf = b"---\naaa\naa\n---\n"
		s = find_closing_fence(buf, 4, YAML, ScanLimits(max_bytes=4))
		assert s.outcome is SearchOutcome.LIMIT_EXCEEDED
		assert s.bytes_scanned == 7

	def test_applies_to_script_metadata(self):
		buf = b"# /// script\n# a\n# b\n# ///\n"
		s = find_closing_fence(buf, 13, PEP723_FENCE, ScanLimits(max_lines=1))
		assert s.outcome is SearchOutcome.LIMIT_EXCEEDED

	def test_exceeded_is_logged(self, caplog):
		buf = b"---\n" + b"x\n" * 3
		with caplog.at_level(logging.WARNING,
		                     logger="front_matter_scanner.scanner.search"):
			find_closing_fence(buf, 4, YAML, ScanLimits(max_lines=2))
		assert "Gave up looking for closing yaml fence" in caplog.text
