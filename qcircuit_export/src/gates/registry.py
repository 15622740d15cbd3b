"""Lookup of catalogue gates by their name in circuit descriptions."""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from .base import Gate
from . import controlled, standard


@dataclass(frozen=True)
class GateSpec:
    """How to build a named gate: factory plus expected argument/bit counts."""

    factory: Callable[..., Gate]
    nr_args: int
    nr_bits: int


GATE_REGISTRY: Dict[str, GateSpec] = {
    "ccx": GateSpec(controlled.CCX, 0, 3),
    "ccz": GateSpec(controlled.CCZ, 0, 3),
    "ch": GateSpec(controlled.CH, 0, 2),
    "crx": GateSpec(controlled.CRX, 1, 2),
    "cry": GateSpec(controlled.CRY, 1, 2),
    "crz": GateSpec(controlled.CRZ, 1, 2),
    "cs": GateSpec(controlled.CS, 0, 2),
    "csdg": GateSpec(controlled.CSdg, 0, 2),
    "cswap": GateSpec(controlled.CSwap, 0, 3),
    "ct": GateSpec(controlled.CT, 0, 2),
    "ctdg": GateSpec(controlled.CTdg, 0, 2),
    "cv": GateSpec(controlled.CV, 0, 2),
    "cvdg": GateSpec(controlled.CVdg, 0, 2),
    "cx": GateSpec(controlled.CX, 0, 2),
    "cy": GateSpec(controlled.CY, 0, 2),
    "cz": GateSpec(controlled.CZ, 0, 2),
    "h": GateSpec(standard.H, 0, 1),
    "i": GateSpec(standard.Identity, 0, 1),
    "rx": GateSpec(standard.RX, 1, 1),
    "ry": GateSpec(standard.RY, 1, 1),
    "rz": GateSpec(standard.RZ, 1, 1),
    "s": GateSpec(standard.S, 0, 1),
    "sdg": GateSpec(standard.Sdg, 0, 1),
    "swap": GateSpec(controlled.Swap, 0, 2),
    "t": GateSpec(standard.T, 0, 1),
    "tdg": GateSpec(standard.Tdg, 0, 1),
    "u1": GateSpec(standard.U1, 1, 1),
    "u2": GateSpec(standard.U2, 2, 1),
    "u3": GateSpec(standard.U3, 3, 1),
    "v": GateSpec(standard.V, 0, 1),
    "vdg": GateSpec(standard.Vdg, 0, 1),
    "x": GateSpec(standard.X, 0, 1),
    "y": GateSpec(standard.Y, 0, 1),
    "z": GateSpec(standard.Z, 0, 1),
}


def lookup_gate(name: str) -> Optional[GateSpec]:
    """Find the spec for a gate name, ignoring case."""
    return GATE_REGISTRY.get(name.lower())


def create_gate(name: str, args: Sequence[float]) -> Gate:
    """Instantiate catalogue gate ``name`` with parameters ``args``.

    Raises:
        KeyError: If the name is not in the catalogue
        ValueError: If the number of parameters is wrong
    """
    spec = lookup_gate(name)
    if spec is None:
        raise KeyError(name)
    if len(args) != spec.nr_args:
        raise ValueError(f"Invalid number of arguments for \"{name}\" gate")
    return spec.factory(*args)
