"""
Closing-fence search result model.

Carries an explicit outcome kind alongside the offset so that a fence
at offset zero is never confused with "not found".
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SearchOutcome(str, Enum):
	"""Why a closing-fence search stopped."""

	FOUND = "found"
	UNTERMINATED = "unterminated"
	LIMIT_EXCEEDED = "limit_exceeded"
	INVALID_LINE = "invalid_line"


class FenceSearch(BaseModel):
	"""
	Result of scanning for a closing fence.

	Attributes:
		outcome: Why the search stopped.
		offset: Start of the closing fence line, set only when found.
		lines_scanned: Lines passed over before stopping.
		bytes_scanned: Bytes passed over before stopping.
	"""

	model_config = ConfigDict(frozen=True)

	outcome: SearchOutcome
	offset: int | None = None
	lines_scanned: int = 0
	bytes_scanned: int = 0

	@property
	def found(self) -> bool:
		return self.outcome is SearchOutcome.FOUND


__all__ = ["SearchOutcome", "FenceSearch"]
