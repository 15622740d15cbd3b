"""Qcircuit LaTeX export for quantum circuits."""

__version__ = "0.1.0"
