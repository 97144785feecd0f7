"""Diagnostic system for Tempolex errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import InvalidInstantError, TemplateParseError, TempolexError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidInstantError",
    "OutputFormat",
    "TemplateParseError",
    "TempolexError",
]
