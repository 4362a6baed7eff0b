"""
Front Matter Scanner - split leading metadata blocks from documents.

Recognizes YAML (``---``) and TOML (``+++``) front matter, the same
fences wrapped in ``# `` or ``#' `` line comments, and ``# /// script``
metadata blocks. Captured content is returned verbatim (minus fences
and comment prefixes) for a downstream YAML/TOML parser.

Main entry points:
    - front_matter_scanner.extract_front_matter: split a document
    - front_matter_scanner.models.ExtractionResult: the result record
    - front_matter_scanner.models.config: ScannerConfig and load_settings()
"""

from front_matter_scanner.models import (
    ExtractionResult,
    FenceType,
    FrontMatterFormat,
    ScanLimits,
)
from front_matter_scanner.scanner import (
    extract_front_matter,
    has_front_matter,
    strip_front_matter,
)

__all__ = [
    "extract_front_matter",
    "has_front_matter",
    "strip_front_matter",
    "ExtractionResult",
    "FenceType",
    "FrontMatterFormat",
    "ScanLimits",
]
