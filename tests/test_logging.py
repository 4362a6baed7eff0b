"""Tests for the logging module."""

from __future__ import annotations

import logging

from front_matter_scanner.utils.logging import (
    LOG_FORMAT,
    configure_logging,
    get_logger,
    preview,
)


class TestPreview:
	"""Tests for preview()."""

	def test_short_text_unchanged(self) -> None:
		"""Short text is shown in full."""
		assert preview("abc") == "'abc'"

	def test_bytes_are_decoded(self) -> None:
		"""Byte buffers are rendered as text."""
		assert preview(b"---\n") == "'---\\n'"

	def test_long_text_truncated(self) -> None:
		"""Long input is cut at the limit and marked."""
		result = preview("x" * 100, limit=10)
		assert result == repr("x" * 10) + "..."

	def test_exact_limit_not_marked(self) -> None:
		"""Input exactly at the limit is not marked as truncated."""
		assert preview("x" * 10, limit=10) == repr("x" * 10)

	def test_split_multibyte_character(self) -> None:
		"""A character cut by the byte limit does not raise."""
		result = preview("é".encode("utf-8") * 10, limit=3)
		assert result.endswith("...")


class TestConfigureLogging:
	"""Tests for configure_logging()."""

	def test_level_and_format(self, monkeypatch) -> None:
		"""Level names map to logging levels."""
		seen = {}
		monkeypatch.setattr(logging, "basicConfig",
		                    lambda **kwargs: seen.update(kwargs))
		configure_logging("debug")
		assert seen["level"] == logging.DEBUG
		assert seen["format"] == LOG_FORMAT

	def test_unknown_level_falls_back_to_info(self, monkeypatch) -> None:
		"""Unrecognized level names fall back to INFO."""
		seen = {}
		monkeypatch.setattr(logging, "basicConfig",
		                    lambda **kwargs: seen.update(kwargs))
		configure_logging("chatty")
		assert seen["level"] == logging.INFO


def test_get_logger() -> None:
	"""get_logger returns the named stdlib logger."""
	assert get_logger("front_matter_scanner.x") is logging.getLogger(
	    "front_matter_scanner.x")
