"""Data model produced by the stack-trace parsers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class StackFrame:
    """A single call-site entry of a parsed trace.

    Attributes:
        name: Function / method name, or None for anonymous frames.
        file: File (or URL) of the call site.
        line: 1-based line number.
        column: Column number as reported by the host.
        is_constructor: True when the call was a construction (``new X``).
            The ``new `` marker itself is stripped from ``name``.
        is_native: True when the host reported no source for the frame.
        evaluator: For frames inside dynamically evaluated code, the frame
            that triggered the evaluation. Owned by this frame; the chain
            ends at a concrete location or a native marker.
    """
    name: Optional[str] = None
    file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    is_constructor: bool = False
    is_native: bool = False
    evaluator: Optional[StackFrame] = None

    def __post_init__(self):
        if self.is_native and (
            self.file is not None
            or self.line is not None
            or self.column is not None
            or self.evaluator is not None
        ):
            raise ValueError("native frames carry no location and no evaluator")

    def evaluator_chain(self) -> Tuple[StackFrame, ...]:
        """Return the evaluators of this frame, nearest trigger first."""
        chain = []
        node = self.evaluator
        while node is not None:
            chain.append(node)
            node = node.evaluator
        return tuple(chain)

    def _fields(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "isConstructor": self.is_constructor,
            "isNative": self.is_native,
            "evaluator": None,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        # Built from the far end of the evaluator chain inward
        result = None
        for node in reversed((self,) + self.evaluator_chain()):
            fields = node._fields()
            fields["evaluator"] = result
            result = fields
        return result


@dataclass(frozen=True)
class ErrorEnvelope:
    """A fully-parsed error blob.

    Attributes:
        kind: Error class name from the first line (e.g. ``TypeError``).
        message: Text after the first ``": "``, or None when absent.
        frames: Frames in host order, innermost (most recent) first.
    """
    kind: str
    message: Optional[str] = None
    frames: Tuple[StackFrame, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "kind": self.kind,
            "message": self.message,
            "frames": [f.to_dict() for f in self.frames],
        }
