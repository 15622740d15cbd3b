#!/usr/bin/env python3
"""
qcircuit-export CLI - Command-line interface for the circuit exporter.

This module provides the entry point for the 'qcircuit-export' command installed via pip.

Usage:
    qcircuit-export circuit.qc                      # Export a file to LaTeX
    qcircuit-export --input "H 0; CX 0 1"          # Export from a string
    qcircuit-export circuit.qc -o circuit.tex       # Save the diagram to a file
    qcircuit-export circuit.qc --format qasm        # Export to OpenQASM 2.0
    qcircuit-export circuit.qc --no-expand          # Draw composite gates as blocks
"""

import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from qcircuit_export.src.common.constants import (
    DEFAULT_CONFIG,
    OUTPUT_FORMATS,
    ExportConfig,
)
from qcircuit_export.src.common.diagnostics import ProgramDiagnostics
from qcircuit_export.src.common.exceptions import ExportError
from qcircuit_export.src.emission.latex_emitter import LatexEmitter
from qcircuit_export.src.emission.qasm_emitter import QasmEmitter
from qcircuit_export.src.parsing.builder import CircuitBuilder
from qcircuit_export.src.parsing.parser import CircuitParser


def validate_format(ctx, param, value):
    """Validate the output format."""
    if value is None:
        return DEFAULT_CONFIG.default_format

    if value.lower() not in OUTPUT_FORMATS:
        raise click.BadParameter(f"must be one of: {', '.join(OUTPUT_FORMATS)}")

    return value.lower()


def export_circuit_source(
    source_code: str,
    source_name: str = "<string>",
    output_format: str = "latex",
    config: ExportConfig = DEFAULT_CONFIG,
    nr_qbits: int | None = None,
    nr_cbits: int | None = None,
    log_level: str = "error",
) -> tuple[bool, str, list]:
    """
    Export a circuit description to LaTeX or OpenQASM.

    Args:
        source_code: The circuit description to export
        source_name: Name of the source (for error messages)
        output_format: "latex" or "qasm"
        config: Export configuration settings
        nr_qbits: Number of qubits (default: one past the highest used)
        nr_cbits: Number of classical bits (default: one past the highest used)
        log_level: Logging verbosity level

    Returns:
        (success: bool, result: str, diagnostics: list)

    Raises:
        SyntaxError: If the description cannot be parsed
        ExportError: For an unknown output format or a circuit that cannot be exported
    """
    diagnostics = ProgramDiagnostics(log_level=log_level, raise_errors=True)

    if output_format not in OUTPUT_FORMATS:
        raise ExportError(f"Unknown output format: {output_format}")

    # Parse
    parser = CircuitParser()
    description = parser.parse(source_code, source_name)
    diagnostics.debug(
        f"Parsed {len(description.statements)} statement(s)",
        stage="parsing",
        source_file=source_name,
    )

    # Build the circuit
    builder = CircuitBuilder(diagnostics)
    circuit = builder.build(description, nr_qbits=nr_qbits, nr_cbits=nr_cbits)
    if diagnostics.has_errors():
        return False, "Circuit construction failed", diagnostics.get_messages()

    # Emit
    if output_format == "qasm":
        emitter = QasmEmitter(diagnostics, config)
    else:
        emitter = LatexEmitter(diagnostics, config)
    result = emitter.emit(circuit)

    if diagnostics.has_errors():
        return False, "Emission failed", diagnostics.get_messages()

    return True, result, diagnostics.get_messages()


def setup_logging(level: str) -> None:
    """Setup logging configuration."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    logging.basicConfig(level=numeric_level, format="%(levelname)s: %(message)s")


@click.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path), required=False)
@click.option(
    "-i",
    "--input",
    "input_string",
    type=str,
    help="Export from string instead of file",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Output file for the exported circuit (default: stdout)",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    default=None,
    callback=validate_format,
    help=f"Output format ({'/'.join(OUTPUT_FORMATS)}, defaults to {DEFAULT_CONFIG.default_format})",
)
@click.option("--qbits", type=click.IntRange(min=0), help="Number of qubits")
@click.option("--cbits", type=click.IntRange(min=0), help="Number of classical bits")
@click.option("--no-init", is_flag=True, help="Omit initialization labels in LaTeX output")
@click.option(
    "--no-expand",
    is_flag=True,
    help="Draw user-defined gates as single blocks instead of their sub-gates",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    help="Set the logging level",
)
def main(
    input_file,
    input_string,
    output,
    output_format,
    qbits,
    cbits,
    no_init,
    no_expand,
    log_level,
):
    """Export circuit descriptions to Qcircuit LaTeX or OpenQASM."""
    setup_logging(log_level)

    # Validate input source
    if input_file and input_string:
        click.echo("Error: Cannot specify both input file and --input string", err=True)
        sys.exit(1)

    if not input_file and not input_string:
        click.echo("Error: Must specify either an input file or --input string", err=True)
        sys.exit(1)

    # Read source code
    if input_string:
        source_code = input_string
        source_name = "<string>"
        if log_level in ["debug", "info"]:
            click.echo("Exporting from string input...")
    else:
        try:
            source_code = input_file.read_text(encoding="utf-8")
            source_name = str(input_file.resolve())
            if log_level in ["debug", "info"]:
                click.echo(f"Exporting {input_file}...")
        except Exception as e:
            click.echo(f"Failed to read input file: {e}", err=True)
            sys.exit(1)

    config = replace(
        DEFAULT_CONFIG, add_init=not no_init, expand_composite=not no_expand
    )

    # Export
    try:
        success, result, diagnostic_messages = export_circuit_source(
            source_code,
            source_name=source_name,
            output_format=output_format,
            config=config,
            nr_qbits=qbits,
            nr_cbits=cbits,
            log_level=log_level,
        )
    except (SyntaxError, ExportError) as e:
        click.echo(f"Export failed: {e}", err=True)
        sys.exit(1)
    verbose = log_level in ["debug", "info"]

    if not success:
        click.echo(f"Export failed: {result}", err=True)
        sys.exit(1)

    # Output
    if output:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(result, encoding="utf-8")
            if verbose:
                click.echo(f"Output saved to {output}")
        except Exception as e:
            click.echo(f"Failed to write output file: {e}", err=True)
            sys.exit(1)
    else:
        click.echo(result, nl=False)

    if verbose:
        msg_count = len(diagnostic_messages) if diagnostic_messages else 0
        msg = (
            f"Export completed with {msg_count} diagnostic(s)."
            if msg_count
            else "Export completed successfully."
        )
        click.echo(msg, err=True)


if __name__ == "__main__":
    main()
