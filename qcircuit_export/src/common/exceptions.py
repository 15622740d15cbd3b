"""Exceptions raised by the export pipeline."""


class ExportError(RuntimeError):
    """Raised when a circuit cannot be exported in the requested form."""


class LoopNestingError(ExportError):
    """Raised when a repeated region is closed while none is open."""


class CircuitParseError(ExportError):
    """Raised for circuit descriptions that parse but do not make sense."""

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        self.message = message
        self.line = line
        self.column = column
        location = f" at {line}:{column}" if line > 0 else ""
        super().__init__(f"{message}{location}")


class NotExportableError(ExportError):
    """Raised when a gate has no representation in an output format."""

    def __init__(self, export_format: str, description: str) -> None:
        self.export_format = export_format
        self.description = description
        super().__init__(
            f"Gate \"{description}\" cannot be exported to {export_format}"
        )
