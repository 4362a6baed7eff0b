from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from front_matter_scanner.utils.logging import configure_logging

from .limits import DEFAULT_MAX_BYTES, DEFAULT_MAX_LINES, ScanLimits


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class ScannerConfig(BaseSettings):
	"""Scanner configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	max_lines: int = Field(
	    DEFAULT_MAX_LINES,
	    alias="FRONT_MATTER_MAX_LINES",
	    description="Lines scanned for a closing fence before giving up",
	)
	max_bytes: int = Field(
	    DEFAULT_MAX_BYTES,
	    alias="FRONT_MATTER_MAX_BYTES",
	    description="Bytes scanned for a closing fence before giving up",
	)
	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level for configure_logging")

	@field_validator("max_lines", "max_bytes")
	@classmethod
	def validate_positive(cls, v: Any, info: "ValidationInfo") -> Any:
		if int(v) <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@property
	def limits(self) -> ScanLimits:
		"""Return the configured ceilings as ScanLimits."""
		return ScanLimits(max_lines=self.max_lines, max_bytes=self.max_bytes)


def load_settings(env_file: str | Path | None = None,
                  configure: bool = False) -> ScannerConfig:
	"""
	Load the `.env` file (if any) and build a ScannerConfig.

	Parameters:
		env_file: Optional path to a dotenv file. Defaults to `.env`.
		configure: Also set up logging at the configured `log_level`.

	Returns:
		ScannerConfig populated from the environment.
	"""
	load_env(env_file)
	cfg = ScannerConfig()
	if configure:
		configure_logging(cfg.log_level)
	return cfg


__all__ = ["ScannerConfig", "load_env", "load_settings"]
