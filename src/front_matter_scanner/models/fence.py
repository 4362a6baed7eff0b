"""
Fence descriptor models.

A fence descriptor identifies a front matter dialect: which data
format it carries, which three-character glyph delimits it and which
comment prefix (if any) wraps every line of the block.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .result import FenceType, FrontMatterFormat


class Dialect(str, Enum):
	"""Front matter dialect family."""

	YAML = "yaml"
	TOML = "toml"
	TOML_PEP723 = "toml_pep723"


class CommentPrefix(str, Enum):
	"""Line comment prefix wrapping a comment-style block."""

	NONE = ""
	HASH = "# "
	ROXYGEN = "#' "

	@property
	def raw(self) -> bytes:
		"""Prefix as bytes."""
		return self.value.encode("ascii")

	@property
	def marker(self) -> bytes:
		"""Bare comment marker, i.e. the prefix without its space."""
		return self.raw.rstrip(b" ")


_FENCE_TYPES: dict[tuple[Dialect, CommentPrefix], FenceType] = {
    (Dialect.YAML, CommentPrefix.NONE): FenceType.YAML,
    (Dialect.YAML, CommentPrefix.HASH): FenceType.YAML_COMMENT,
    (Dialect.YAML, CommentPrefix.ROXYGEN): FenceType.YAML_ROXY,
    (Dialect.TOML, CommentPrefix.NONE): FenceType.TOML,
    (Dialect.TOML, CommentPrefix.HASH): FenceType.TOML_COMMENT,
    (Dialect.TOML, CommentPrefix.ROXYGEN): FenceType.TOML_ROXY,
    (Dialect.TOML_PEP723, CommentPrefix.HASH): FenceType.TOML_PEP723,
}


class FenceDescriptor(BaseModel):
	"""
	Identity of a fenced block.

	Attributes:
		dialect: Dialect family of the block.
		glyph: Three-character fence glyph, None for script metadata.
		prefix: Comment prefix carried by every line of the block.
	"""

	model_config = ConfigDict(frozen=True)

	dialect: Dialect
	glyph: str | None = Field(default=None, min_length=3, max_length=3)
	prefix: CommentPrefix = CommentPrefix.NONE

	@property
	def glyph_bytes(self) -> bytes:
		return (self.glyph or "").encode("ascii")

	@property
	def is_comment_wrapped(self) -> bool:
		return self.prefix is not CommentPrefix.NONE

	@property
	def format(self) -> FrontMatterFormat:
		if self.dialect is Dialect.YAML:
			return FrontMatterFormat.YAML
		return FrontMatterFormat.TOML

	@property
	def fence_type(self) -> FenceType:
		return _FENCE_TYPES[(self.dialect, self.prefix)]


PEP723_FENCE = FenceDescriptor(dialect=Dialect.TOML_PEP723,
                               prefix=CommentPrefix.HASH)

__all__ = ["Dialect", "CommentPrefix", "FenceDescriptor", "PEP723_FENCE"]
