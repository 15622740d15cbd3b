import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .exceptions import ExportError

"""Unified diagnostic collection for the export pipeline."""

logger = logging.getLogger("qcircuit_export")


class DiagnosticSeverity(Enum):
    """Severity levels for export diagnostics."""

    DEBUG = "debug"  # Internal pipeline information
    INFO = "info"  # Informational messages for users
    WARNING = "warning"  # Issues that don't prevent export
    ERROR = "error"  # Issues that prevent a successful export


_SEVERITY_ORDER = [
    DiagnosticSeverity.DEBUG,
    DiagnosticSeverity.INFO,
    DiagnosticSeverity.WARNING,
    DiagnosticSeverity.ERROR,
]

_LOG_LEVELS = {
    DiagnosticSeverity.DEBUG: logging.DEBUG,
    DiagnosticSeverity.INFO: logging.INFO,
    DiagnosticSeverity.WARNING: logging.WARNING,
    DiagnosticSeverity.ERROR: logging.ERROR,
}


@dataclass
class Diagnostic:
    """A single diagnostic message with context."""

    severity: DiagnosticSeverity
    message: str
    stage: str  # parsing, circuit, layout, emission
    line: int = 0
    column: int = 0
    source_file: Optional[str] = None


class ProgramDiagnostics:
    """Central diagnostic collection for one export run.

    Every diagnostic is recorded and also forwarded to the ``qcircuit_export``
    logger, so the CLI's ``--log-level`` decides what reaches the terminal.

    Usage:
        diagnostics = ProgramDiagnostics()
        diagnostics.error("Unknown gate", stage="parsing", line=3)
        if diagnostics.has_errors():
            print(diagnostics.format_for_user())
    """

    def __init__(self, log_level: str = "warning", raise_errors: bool = False):
        self.diagnostics: List[Diagnostic] = []
        self.log_level = log_level
        self.raise_errors = raise_errors
        self._error_count = 0
        self._warning_count = 0
        self.default_stage = "unknown"

    def debug(
        self,
        message: str,
        stage: str | None = None,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
    ) -> None:
        """Add an internal debug message."""
        self._add(DiagnosticSeverity.DEBUG, message, stage, line, column, source_file)

    def info(
        self,
        message: str,
        stage: str | None = None,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
    ) -> None:
        """Add an informational message."""
        self._add(DiagnosticSeverity.INFO, message, stage, line, column, source_file)

    def warning(
        self,
        message: str,
        stage: str | None = None,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
    ) -> None:
        """Add a warning (always recorded, doesn't stop the export)."""
        self._add(
            DiagnosticSeverity.WARNING, message, stage, line, column, source_file
        )
        self._warning_count += 1

    def error(
        self,
        message: str,
        stage: str | None = None,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
    ) -> None:
        """Add an error (stops the export, raises in raise_errors mode)."""
        diag = self._add(
            DiagnosticSeverity.ERROR, message, stage, line, column, source_file
        )
        self._error_count += 1
        if self.raise_errors:
            raise ExportError(self._format_diagnostic(diag))

    def _add(
        self,
        severity: DiagnosticSeverity,
        message: str,
        stage: str | None,
        line: int,
        column: int,
        source_file: Optional[str],
    ) -> Diagnostic:
        diag = Diagnostic(
            severity=severity,
            message=message,
            stage=stage or self.default_stage,
            line=line,
            column=column,
            source_file=source_file,
        )
        self.diagnostics.append(diag)
        logger.log(_LOG_LEVELS[severity], self._format_diagnostic(diag))
        return diag

    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return self._error_count > 0

    def error_count(self) -> int:
        return self._error_count

    def warning_count(self) -> int:
        return self._warning_count

    def get_messages(
        self, min_severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    ) -> List[str]:
        """Get formatted messages at or above the specified severity level."""
        threshold = _SEVERITY_ORDER.index(min_severity)
        return [
            self._format_diagnostic(diag)
            for diag in self.diagnostics
            if _SEVERITY_ORDER.index(diag.severity) >= threshold
        ]

    def _format_diagnostic(self, diag: Diagnostic) -> str:
        # Format: SEVERITY [stage:file:line:col]: message
        location_parts = [diag.stage]
        if diag.source_file:
            location_parts.append(Path(diag.source_file).name)
        if diag.line > 0:
            location_parts.append(str(diag.line))
            if diag.column > 0:
                location_parts.append(str(diag.column))

        location = ":".join(location_parts)
        return f"{diag.severity.value.upper()} [{location}]: {diag.message}"

    def format_for_user(self) -> str:
        """Format all diagnostics for user-friendly output."""
        if not self.diagnostics:
            return "No diagnostics."

        try:
            min_severity = DiagnosticSeverity(self.log_level.lower())
        except ValueError:
            min_severity = DiagnosticSeverity.WARNING

        messages = self.get_messages(min_severity)
        summary = (
            f"\nExport summary: {self._error_count} error(s), "
            f"{self._warning_count} warning(s)"
        )
        return "\n".join(messages) + summary

    def merge(self, other: "ProgramDiagnostics") -> None:
        """Merge diagnostics from another collector."""
        self.diagnostics.extend(other.diagnostics)
        self._error_count += other._error_count
        self._warning_count += other._warning_count
