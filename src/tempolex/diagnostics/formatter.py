"""Render diagnostics for humans, logs and tools.

Three layouts are supported:

    rust    error[PARSE_TEMPLATE_MISMATCH]: Input 'x' does not match ...
              = template: YYYY-MM-DD
              = help: Check that the input uses the same layout ...
    simple  PARSE_TEMPLATE_MISMATCH: Input 'x' does not match ...
    json    {"code": "PARSE_TEMPLATE_MISMATCH", "code_value": 4001, ...}

Parse diagnostics quote caller input verbatim, so line breaks and other
control characters are escaped in the text layouts.

Python 3.11+. Zero external dependencies.
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

_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": "\\x00"})

_ANSI_SEVERITY = {"error": "\033[1;31m", "warning": "\033[1;33m"}
_ANSI_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Diagnostic layout."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Formats Diagnostic objects in one of the OutputFormat layouts.

    Attributes:
        output_format: Layout to produce
        color: Wrap the severity label in ANSI colors (rust layout only)
        max_length: Truncate messages and hints longer than this; None keeps
            them whole

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.template_mismatch("x", "YYYY", "en_US")))
        PARSE_TEMPLATE_MISMATCH: Input 'x' does not match template 'YYYY' for locale 'en_US'
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False
    max_length: int | None = None

    def format(self, diagnostic: Diagnostic) -> str:
        """Format one diagnostic."""
        match self.output_format:
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._text(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._json(diagnostic)
            case _:
                return self._rust(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format several diagnostics, separated by blank lines."""
        return "\n\n".join(self.format(diagnostic) for diagnostic in diagnostics)

    def _rust(self, diagnostic: Diagnostic) -> str:
        label = diagnostic.severity
        if self.color:
            label = f"{_ANSI_SEVERITY[label]}{label}{_ANSI_RESET}"

        lines = [f"{label}[{diagnostic.code.name}]: {self._text(diagnostic.message)}"]
        if diagnostic.template is not None:
            lines.append(f"  = template: {self._text(diagnostic.template)}")
        if diagnostic.hint:
            lines.append(f"  = help: {self._text(diagnostic.hint)}")
        return "\n".join(lines)

    def _json(self, diagnostic: Diagnostic) -> str:
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": diagnostic.code.category.value,
            "severity": diagnostic.severity,
            "message": self._truncate(diagnostic.message),
        }
        if diagnostic.template is not None:
            payload["template"] = diagnostic.template
        if diagnostic.hint:
            payload["hint"] = self._truncate(diagnostic.hint)
        # json.dumps escapes control characters itself
        return json.dumps(payload, ensure_ascii=False)

    def _text(self, text: str) -> str:
        return self._truncate(text).translate(_ESCAPES)

    def _truncate(self, text: str) -> str:
        if self.max_length is None or len(text) <= self.max_length:
            return text
        return text[: self.max_length] + "..."
