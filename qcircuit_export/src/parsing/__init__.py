from .parser import CircuitParser
from .transformer import CircuitTransformer
from .builder import CircuitBuilder
from .nodes import CircuitDescription

"""Parsing module for circuit descriptions."""


__all__ = ["CircuitParser", "CircuitTransformer", "CircuitBuilder", "CircuitDescription"]
