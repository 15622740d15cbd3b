from .latex_renderer import render_latex, default_wire
from .latex_emitter import LatexEmitter, emit_latex
from .qasm_emitter import QasmEmitter, emit_qasm

__all__ = [
    # Main API
    "LatexEmitter",
    "QasmEmitter",
    "emit_latex",
    "emit_qasm",

    # Rendering (for advanced use)
    "render_latex",
    "default_wire",
]
