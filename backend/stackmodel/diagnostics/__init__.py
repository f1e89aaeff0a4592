"""Diagnosable errors carrying a parsed model of their stack."""
from .capture import format_host_stack
from .exception import UNAVAILABLE, DiagnosableError, StackUnavailable, get_stack, parse_error

__all__ = [
    "UNAVAILABLE",
    "DiagnosableError",
    "StackUnavailable",
    "format_host_stack",
    "get_stack",
    "parse_error",
]
