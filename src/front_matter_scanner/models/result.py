"""
Extraction result models.

Defines the record returned by every front matter extraction, along
with the enumerations naming the detected format and fence style.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class FrontMatterFormat(str, Enum):
	"""Data format of the captured block."""

	NONE = "none"
	YAML = "yaml"
	TOML = "toml"


class FenceType(str, Enum):
	"""Concrete fence style the block was delimited with."""

	NONE = "none"
	YAML = "yaml"
	YAML_COMMENT = "yaml_comment"
	YAML_ROXY = "yaml_roxy"
	TOML = "toml"
	TOML_COMMENT = "toml_comment"
	TOML_ROXY = "toml_roxy"
	TOML_PEP723 = "toml_pep723"


class ExtractionResult(BaseModel):
	"""
	Outcome of a front matter extraction.

	When ``found`` is False the record is a no-op: ``content`` is empty,
	``format`` and ``fence_type`` are ``none`` and ``body`` holds the
	whole input unchanged.

	Attributes:
		found: Whether a complete front matter block was found.
		format: Data format of the block (yaml/toml).
		fence_type: Fence style, including comment wrapping.
		content: Block text with fences and comment prefixes removed.
		body: Document text following the block.
	"""

	model_config = ConfigDict(frozen=True)

	found: bool
	format: FrontMatterFormat = FrontMatterFormat.NONE
	fence_type: FenceType = FenceType.NONE
	content: str = ""
	body: str = ""

	@model_validator(mode="after")
	def check_not_found_is_empty(self) -> "ExtractionResult":
		if self.found:
			if self.format is FrontMatterFormat.NONE or (
			    self.fence_type is FenceType.NONE):
				raise ValueError("found result needs a format and fence_type")
			return self
		if (self.format is not FrontMatterFormat.NONE
		    or self.fence_type is not FenceType.NONE or self.content):
			raise ValueError(
			    "not-found result must have no format, fence or content")
		return self

	@classmethod
	def not_found(cls, text: str) -> "ExtractionResult":
		"""Return the no-op result for ``text``."""
		# Any str is a valid body here, lone surrogates included, which
		# pydantic's str validation would reject.
		return cls.model_construct(found=False, body=text)

	def to_dict(self) -> dict[str, Any]:
		"""
		Convert to a plain dictionary.

		Returns:
			Dictionary with found, format, fence_type, content and body,
			enum members replaced by their string values.
		"""
		return {
		    "found": self.found,
		    "format": self.format.value,
		    "fence_type": self.fence_type.value,
		    "content": self.content,
		    "body": self.body,
		}


__all__ = ["ExtractionResult", "FrontMatterFormat", "FenceType"]
