#!/usr/bin/env python3
"""
qcircuit-export CLI - Entry point for the circuit exporter.

This module allows running the exporter as:
    python -m qcircuit_export circuit.qc
    qcircuit-export circuit.qc  (when installed via pip)
"""

from qcircuit_export.cli import main

if __name__ == "__main__":
    main()
