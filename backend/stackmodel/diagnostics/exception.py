"""Diagnosable errors and StackModel assembly.

A :class:`DiagnosableError` parses its stack once, while it is being
constructed, and keeps the result as an immutable tuple of frames. Any parse
failure makes the whole model :data:`UNAVAILABLE`; a partially decoded stack
is never attached. Construction itself never fails because of the stack.
"""
from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Optional, Tuple, Union

from ..config import get_config
from ..parser import DEFAULT_MAX_EVAL_DEPTH, ErrorEnvelope, StackFrame, StackParseError, parse_envelope
from .capture import format_host_stack

logger = logging.getLogger(__name__)


class StackUnavailable(Enum):
    """Sentinel type for a stack that could not be parsed."""
    UNAVAILABLE = "unavailable"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNAVAILABLE"


UNAVAILABLE = StackUnavailable.UNAVAILABLE

StackModel = Tuple[StackFrame, ...]


def _restore_error(cls, args, state):
    """Rebuild a pickled :class:`DiagnosableError` without re-capturing."""
    error = cls.__new__(cls, *args)
    error.args = args
    error.__dict__.update(state)
    return error


def parse_error(
    text: str, *, max_eval_depth: Optional[int] = None
) -> Union[ErrorEnvelope, StackUnavailable]:
    """Parse an error blob, or return :data:`UNAVAILABLE` if any part is malformed.

    Running out of interpreter stack while parsing also yields
    :data:`UNAVAILABLE`.

    Args:
        text: Raw ``Kind: message`` + frame lines text.
        max_eval_depth: Eval nesting cap; defaults to the configured value.
    """
    if max_eval_depth is None:
        max_eval_depth = get_config().parser.max_eval_depth
    try:
        return parse_envelope(text, max_eval_depth=max_eval_depth)
    except (StackParseError, RecursionError) as exc:
        logger.debug("Stack model unavailable: %s", exc)
        return UNAVAILABLE


class DiagnosableError(Exception):
    """An exception that carries a structured model of its call stack.

    Attributes:
        kind: Error kind, the class name.
        message: Message passed at construction, or None.
        stack_text: The raw blob the model was parsed from (None if the host
            stack could not be captured).
    """

    def __init__(self, message: Optional[str] = None, *, stack_text: Optional[str] = None):
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.kind = type(self).__name__
        self.message = message

        max_eval_depth = DEFAULT_MAX_EVAL_DEPTH
        try:
            config = get_config()
            max_eval_depth = config.parser.max_eval_depth
            if stack_text is None:
                stack_text = format_host_stack(
                    self.kind,
                    message,
                    start=sys._getframe(1),
                    limit=config.capture.stack_trace_limit,
                    skip_internal=config.capture.skip_internal_frames,
                )
        except Exception as exc:
            logger.warning("Could not capture the stack for %s: %s", self.kind, exc)
        self.stack_text = stack_text

        if stack_text is None:
            self._envelope: Union[ErrorEnvelope, StackUnavailable] = UNAVAILABLE
        else:
            self._envelope = parse_error(stack_text, max_eval_depth=max_eval_depth)

    def __reduce__(self):
        # Subclass signatures differ from args; keep the captured state as is
        return _restore_error, (type(self), self.args, self.__dict__.copy())

    @property
    def envelope(self) -> Union[ErrorEnvelope, StackUnavailable]:
        """Kind, message and frames as parsed from :attr:`stack_text`."""
        return self._envelope

    @property
    def stack_model(self) -> Union[StackModel, StackUnavailable]:
        """Frames innermost first, or :data:`UNAVAILABLE`."""
        if self._envelope is UNAVAILABLE:
            return UNAVAILABLE
        return self._envelope.frames


def get_stack() -> Union[StackModel, StackUnavailable]:
    """Return the frames of the caller's current stack, innermost first."""
    return DiagnosableError().stack_model
