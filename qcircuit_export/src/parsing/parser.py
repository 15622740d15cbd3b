"""Parser entry point for circuit descriptions."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from lark import Lark
from lark.exceptions import LexError, ParseError

from .nodes import CircuitDescription
from .transformer import CircuitTransformer


class CircuitParser:
    """Main parser class for the circuit description language."""

    def __init__(self, grammar_path: Optional[Path] = None):
        """Initialize parser with grammar file."""
        if grammar_path is None:
            grammar_path = (
                Path(__file__).resolve().parent.parent.parent
                / "grammar"
                / "circuit.lark"
            )

        self.grammar_path = grammar_path
        self.parser = None
        self.transformer = CircuitTransformer()
        self._load_grammar()

    def _load_grammar(self) -> None:
        """Load and compile the Lark grammar."""
        try:
            with open(self.grammar_path, "r") as handle:
                grammar_text = handle.read()

            self.parser = Lark(
                grammar_text,
                parser="lalr",
                transformer=self.transformer,
                start="start",
                debug=False,
            )
        except FileNotFoundError as exc:
            raise FileNotFoundError(
                f"Grammar file not found: {self.grammar_path}"
            ) from exc
        except Exception as exc:  # pragma: no cover - unexpected
            raise RuntimeError(f"Failed to load grammar: {exc}") from exc

    def parse(self, source_code: str, filename: str = "<string>") -> CircuitDescription:
        """Parse a circuit description.

        Args:
            source_code: The source text to parse
            filename: Source name used in error messages

        Returns:
            CircuitDescription holding the top-level statements

        Raises:
            SyntaxError: If the source has parse errors
            RuntimeError: If the parser is not initialized or an unexpected
                error occurs
        """
        if self.parser is None:
            raise RuntimeError("Parser not initialized")

        try:
            description = self.parser.parse(source_code)
        except (ParseError, LexError) as exc:
            raise SyntaxError(f"Parse error in {filename}: {exc}") from exc
        except Exception as exc:
            raise RuntimeError(f"Unexpected error parsing {filename}: {exc}") from exc

        if not isinstance(description, CircuitDescription):
            raise RuntimeError(
                f"Expected CircuitDescription, got {type(description)}"
            )
        description.source_file = filename
        return description

    def parse_file(self, file_path: Path) -> CircuitDescription:
        """Parse a circuit description file."""
        try:
            with open(file_path, "r") as handle:
                source_code = handle.read()
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Source file not found: {file_path}") from exc
        return self.parse(source_code, str(file_path))
