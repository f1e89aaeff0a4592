"""stackmodel: structured stack traces for diagnosable errors.

Turns the text a host runtime prints for an uncaught error
(``Kind: message`` followed by ``    at ...`` lines) into an innermost-first
tuple of typed frames, including chains of frames for dynamically evaluated
code nested inside other evaluated code.

Modules:
    - parser: location, frame, eval-descriptor and envelope parsers
    - diagnostics: DiagnosableError, parse_error, get_stack, host capture
    - config: YAML-backed settings, one-time configure()
    - cli: ``stackmodel`` command
"""
from .config import StackModelConfig, configure, get_config, load_config
from .diagnostics import UNAVAILABLE, DiagnosableError, StackUnavailable, get_stack, parse_error
from .parser import (
    ErrorEnvelope,
    MalformedEnvelope,
    MalformedEvalDescriptor,
    MalformedFrame,
    StackFrame,
    StackParseError,
)

__version__ = "0.1.0"

__all__ = [
    "UNAVAILABLE",
    "DiagnosableError",
    "ErrorEnvelope",
    "MalformedEnvelope",
    "MalformedEvalDescriptor",
    "MalformedFrame",
    "StackFrame",
    "StackModelConfig",
    "StackParseError",
    "StackUnavailable",
    "configure",
    "get_config",
    "get_stack",
    "load_config",
    "parse_error",
]
