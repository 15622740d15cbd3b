"""Shared constants and export configuration."""

from dataclasses import dataclass

# Output formats understood by the CLI
OUTPUT_FORMATS = ("latex", "qasm")

# Measurement bases accepted by the circuit description language
MEASUREMENT_BASES = ("X", "Y", "Z")


@dataclass(frozen=True)
class ExportConfig:
    """Settings that control how a circuit is exported."""

    # Add |0> / 0 initialization labels in front of every bit line
    add_init: bool = True
    # Draw composite gates as their individual sub-gates
    expand_composite: bool = True

    # Qcircuit column and row spacing used in the header
    column_spacing: str = "1em"
    row_spacing: str = ".7em"

    # Label placed in the middle of a repeated region
    cds_label: str = r"\cdots"

    # Register names used for OpenQASM output
    qreg_name: str = "q"
    creg_name: str = "b"

    default_format: str = "latex"


DEFAULT_CONFIG = ExportConfig()
