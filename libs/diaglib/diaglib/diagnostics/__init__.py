"""Diagnostics subpackage (Layer 0, zero internal dependencies)."""

from diaglib.diagnostics.collection import Diagnostics, append
from diaglib.diagnostics.diagnostic import (
    Description,
    Diagnostic,
    NativeError,
    SimpleDiagnostic,
    simple_warning,
    sourceless,
)
from diaglib.diagnostics.errors import DiagnosticsError, NonFatalError
from diaglib.diagnostics.location import Source, SourcePos, SourceRange
from diaglib.diagnostics.severity import Severity

__all__ = [
    "Severity",
    "SourcePos",
    "SourceRange",
    "Source",
    "Description",
    "Diagnostic",
    "SimpleDiagnostic",
    "NativeError",
    "sourceless",
    "simple_warning",
    "Diagnostics",
    "append",
    "DiagnosticsError",
    "NonFatalError",
]
