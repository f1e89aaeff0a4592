"""Grammar-driven parsers for host error blobs.

Modules:
    - location: ``<file>:<line>:<column>`` fragments
    - frame: one ``at ...`` line
    - eval_descriptor: nested ``eval at ...`` descriptors
    - envelope: the whole blob (kind, message, frames)
"""
from .envelope import parse_envelope
from .errors import MalformedEnvelope, MalformedEvalDescriptor, MalformedFrame, StackParseError
from .eval_descriptor import DEFAULT_MAX_EVAL_DEPTH, MAX_EVAL_DEPTH_LIMIT, parse_eval_descriptor
from .frame import parse_frame
from .location import Location, parse_location
from .schemas import ErrorEnvelope, StackFrame

__all__ = [
    "DEFAULT_MAX_EVAL_DEPTH",
    "MAX_EVAL_DEPTH_LIMIT",
    "ErrorEnvelope",
    "Location",
    "MalformedEnvelope",
    "MalformedEvalDescriptor",
    "MalformedFrame",
    "StackFrame",
    "StackParseError",
    "parse_envelope",
    "parse_eval_descriptor",
    "parse_frame",
    "parse_location",
]
