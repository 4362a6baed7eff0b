"""
Front matter scanner models.

This subpackage contains Pydantic models for the extraction result,
fence descriptors, scan limits and configuration.

Key models:
    - ExtractionResult: Outcome of a front matter extraction
    - FenceDescriptor: Dialect, glyph and comment prefix of a block
    - ScanLimits: Line/byte ceilings for the closing fence search
    - FenceSearch: Outcome of a closing fence search
    - ScannerConfig: Configuration loaded from environment
"""

from .result import ExtractionResult, FrontMatterFormat, FenceType
from .fence import Dialect, CommentPrefix, FenceDescriptor, PEP723_FENCE
from .limits import ScanLimits, DEFAULT_LIMITS
from .search_result import FenceSearch, SearchOutcome
from .config import ScannerConfig, load_env, load_settings

__all__ = [
    "ExtractionResult",
    "FrontMatterFormat",
    "FenceType",
    "Dialect",
    "CommentPrefix",
    "FenceDescriptor",
    "PEP723_FENCE",
    "ScanLimits",
    "DEFAULT_LIMITS",
    "FenceSearch",
    "SearchOutcome",
    "ScannerConfig",
    "load_env",
    "load_settings",
]
