"""Gate catalogue: operations that can draw themselves in a diagram."""

from .base import Gate
from .standard import (
    SingleQubitGate,
    ParametrizedGate,
    Identity,
    H,
    X,
    Y,
    Z,
    S,
    Sdg,
    T,
    Tdg,
    V,
    Vdg,
    RX,
    RY,
    RZ,
    U1,
    U2,
    U3,
)
from .controlled import (
    Controlled,
    Swap,
    CX,
    CY,
    CZ,
    CH,
    CS,
    CSdg,
    CT,
    CTdg,
    CV,
    CVdg,
    CRX,
    CRY,
    CRZ,
    CCX,
    CCZ,
    CSwap,
)
from .composite import Composite, SubGate
from .static_loop import Loop
from .registry import GateSpec, GATE_REGISTRY, create_gate

__all__ = [
    "Gate",
    "SingleQubitGate",
    "ParametrizedGate",
    "Controlled",
    "Composite",
    "SubGate",
    "Loop",
    # Catalogue
    "Identity",
    "H",
    "X",
    "Y",
    "Z",
    "S",
    "Sdg",
    "T",
    "Tdg",
    "V",
    "Vdg",
    "RX",
    "RY",
    "RZ",
    "U1",
    "U2",
    "U3",
    "Swap",
    "CX",
    "CY",
    "CZ",
    "CH",
    "CS",
    "CSdg",
    "CT",
    "CTdg",
    "CV",
    "CVdg",
    "CRX",
    "CRY",
    "CRZ",
    "CCX",
    "CCZ",
    "CSwap",
    # Lookup by name
    "GateSpec",
    "GATE_REGISTRY",
    "create_gate",
]
