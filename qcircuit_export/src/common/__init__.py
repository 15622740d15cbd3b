"""Common utilities shared across export stages."""

from .diagnostics import ProgramDiagnostics, DiagnosticSeverity
from .exceptions import (
    ExportError,
    LoopNestingError,
    CircuitParseError,
    NotExportableError,
)
from .bit_ranges import get_ranges
from .constants import *

__all__ = [
    "ProgramDiagnostics",
    "DiagnosticSeverity",
    "ExportError",
    "LoopNestingError",
    "CircuitParseError",
    "NotExportableError",
    "get_ranges",
    # Constants
    "ExportConfig",
    "DEFAULT_CONFIG",
    "OUTPUT_FORMATS",
    "MEASUREMENT_BASES",
]
