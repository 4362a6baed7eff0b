"""
Logging configuration module.

Provides centralized logging setup with configurable log levels and
consistent formatting, plus a helper that renders short buffer excerpts
for log messages.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

PREVIEW_LIMIT = 40


def preview(data: bytes | str, limit: int = PREVIEW_LIMIT) -> str:
	"""Return a short printable excerpt of a buffer.

	Parameters:
		data: Raw document bytes or text.
		limit: Maximum number of characters kept before truncation.

	Returns:
		The ``repr`` of the first ``limit`` characters, suffixed with
		``...`` when the buffer was longer.
	"""
	truncated = len(data) > limit
	head = data[:limit]
	if isinstance(head, bytes):
		head = head.decode("utf-8", errors="replace")
	return repr(head) + ("..." if truncated else "")


def configure_logging(level: str = "info") -> None:
	"""
	Configure basic logging with level and format.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = logging._nameToLevel.get(level.upper(), logging.INFO)
	logging.basicConfig(level=lvl, format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = [
    "configure_logging",
    "get_logger",
    "preview",
]
