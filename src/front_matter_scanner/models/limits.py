"""
Scan limits model.

Defines the ceilings that bound a closing-fence search so that an
unterminated block in a very large document cannot force a full scan.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core.core_schema import ValidationInfo

DEFAULT_MAX_LINES = 10_000
DEFAULT_MAX_BYTES = 1_048_576  # 1 MiB


class ScanLimits(BaseModel):
	"""
	Line and byte ceilings for a closing-fence search.

	A search that scans more than ``max_lines`` lines or more than
	``max_bytes`` bytes without meeting a closing fence gives up and
	reports the block as not found.
	"""

	model_config = ConfigDict(frozen=True)

	max_lines: int = Field(DEFAULT_MAX_LINES,
	                       description="Maximum lines scanned for a fence")
	max_bytes: int = Field(DEFAULT_MAX_BYTES,
	                       description="Maximum bytes scanned for a fence")

	@field_validator("max_lines", "max_bytes")
	@classmethod
	def validate_positive(cls, v: int, info: ValidationInfo) -> int:
		if v <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v


DEFAULT_LIMITS = ScanLimits()

__all__ = [
    "ScanLimits",
    "DEFAULT_LIMITS",
    "DEFAULT_MAX_LINES",
    "DEFAULT_MAX_BYTES",
]
