"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# C0, DEL and C1 control characters are escaped so that untrusted input
# cannot forge extra log lines or terminal escape sequences.
_CONTROL_ESCAPES = {
    code: f"\\x{code:02x}" for code in (*range(0x20), *range(0x7F, 0xA0))
}


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style multi-line output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate echoed input to prevent information leakage
        max_content_length: Maximum echoed length when sanitizing

    Example:
        >>> from moneypattern.diagnostics import ErrorTemplate
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.currency_unknown("XYZ")))
        CURRENCY_UNKNOWN: Unknown currency 'XYZ'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"
        parts = [f"{severity}[{diagnostic.code.name}]: {self._clean(diagnostic.message)}"]

        location = self._location(diagnostic)
        if location:
            parts.append(f"  --> {location}")

        if diagnostic.expected is not None:
            parts.append(f"  = expected: {self._clean(repr(diagnostic.expected))}")

        if diagnostic.found is not None:
            parts.append(f"  = found: {self._clean(repr(diagnostic.found))}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._clean(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.pattern is not None:
            data["pattern"] = diagnostic.pattern
        if diagnostic.pattern_index is not None:
            data["pattern_index"] = diagnostic.pattern_index
        if diagnostic.value is not None:
            data["value"] = self._maybe_sanitize(diagnostic.value)
        if diagnostic.input_index is not None:
            data["input_index"] = diagnostic.input_index
        if diagnostic.expected is not None:
            data["expected"] = diagnostic.expected
        if diagnostic.found is not None:
            data["found"] = diagnostic.found
        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)

    def _location(self, diagnostic: Diagnostic) -> str:
        pieces: list[str] = []
        if diagnostic.pattern is not None and diagnostic.pattern_index is not None:
            pieces.append(f"pattern {diagnostic.pattern!r} index {diagnostic.pattern_index}")
        if diagnostic.value is not None and diagnostic.input_index is not None:
            value = self._maybe_sanitize(diagnostic.value)
            pieces.append(f"input {value!r} index {diagnostic.input_index}")
        return self._clean(", ".join(pieces))

    def _clean(self, text: str) -> str:
        return text.translate(_CONTROL_ESCAPES)

    def _maybe_sanitize(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
