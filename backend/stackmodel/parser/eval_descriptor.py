"""Parser for ``eval at ...`` descriptors.

Frames that run inside dynamically evaluated code carry, instead of a plain
location, a descriptor of where the evaluation was triggered:

    eval at <evaluatee> (<inner>)[, <outer location>]

``<inner>`` is either a plain location (the call site of the evaluating
function) or another descriptor, when the evaluating code was itself
evaluated. ``<outer location>`` is the position inside the evaluated code.

Example (two levels):
    eval at render (eval at compile (/srv/app.js:3:7), <anonymous>:1:1), <anonymous>:2:5

The inner part is delimited by balanced parentheses rather than a regex so
that nested descriptors with their own trailing location split correctly.
Nesting levels are peeled in a loop, so deep descriptors never recurse.
"""
import re
from typing import Dict, List, Optional, Tuple

from .errors import MalformedEvalDescriptor
from .location import parse_location
from .markers import is_native_marker, strip_constructor
from .schemas import StackFrame

# Explicit cap on nesting; real traces stay in single digits.
DEFAULT_MAX_EVAL_DEPTH = 256
# Highest cap the settings accept.
MAX_EVAL_DEPTH_LIMIT = 512

# Matched at an offset, so no ``^`` anchor.
_EVAL_HEAD = re.compile(r"eval\s+at\s+(.*?) \(")
_OUTER_SEPARATOR = ", "


def is_eval_descriptor(fragment: str) -> bool:
    """Return True if *fragment* starts like an eval descriptor."""
    return bool(_EVAL_HEAD.match(fragment))


def _matching_parens(text: str) -> Dict[int, int]:
    """Map the index of every balanced ``(`` to the index of its ``)``."""
    pairs = {}
    opened: List[int] = []
    for index, ch in enumerate(text):
        if ch == "(":
            opened.append(index)
        elif ch == ")" and opened:
            pairs[opened.pop()] = index
    return pairs


def _base_evaluator(evaluatee: str, inner: str, descriptor: str) -> StackFrame:
    name, is_constructor = strip_constructor(evaluatee)
    location = parse_location(inner)
    if location is not None:
        return StackFrame(
            name=name,
            file=location.file,
            line=location.line,
            column=location.column,
            is_constructor=is_constructor,
        )
    if is_native_marker(inner):
        return StackFrame(name=name, is_constructor=is_constructor, is_native=True)
    raise MalformedEvalDescriptor("eval descriptor has no usable origin", descriptor)


def _frame(name: Optional[str], outer: Optional[str], evaluator: StackFrame, descriptor: str) -> StackFrame:
    is_constructor = False
    if name is not None:
        name, is_constructor = strip_constructor(name)

    if outer is None:
        return StackFrame(name=name, is_constructor=is_constructor, evaluator=evaluator)

    location = parse_location(outer)
    if location is None:
        raise MalformedEvalDescriptor("invalid location after eval descriptor", descriptor)
    return StackFrame(
        name=name,
        file=location.file,
        line=location.line,
        column=location.column,
        is_constructor=is_constructor,
        evaluator=evaluator,
    )


def parse_eval_descriptor(
    name: Optional[str],
    descriptor: str,
    *,
    max_depth: int = DEFAULT_MAX_EVAL_DEPTH,
) -> StackFrame:
    """Parse an eval descriptor into a frame with an ``evaluator`` chain.

    Args:
        name: Name of the frame running the evaluated code, as printed
            (a leading ``new `` is stripped here).
        descriptor: The ``eval at ...`` text.
        max_depth: Maximum number of nested descriptors accepted.

    Returns:
        The frame for *name*. Its ``evaluator`` is the triggering call site;
        nested descriptors continue the chain through ``evaluator.evaluator``.

    Raises:
        MalformedEvalDescriptor: The descriptor is truncated, unbalanced,
            followed by junk, has an unusable origin, or nests deeper than
            *max_depth*.
    """
    pairs = _matching_parens(descriptor)
    excerpt = descriptor[:200]
    # (frame name, outer location) per level, outermost first
    levels: List[Tuple[Optional[str], Optional[str]]] = []
    start, end = 0, len(descriptor)

    while True:
        m = _EVAL_HEAD.match(descriptor, start, end)
        if not m:
            raise MalformedEvalDescriptor("not an eval descriptor", excerpt)
        if len(levels) == max_depth:
            raise MalformedEvalDescriptor(
                f"eval descriptor nesting exceeds {max_depth} levels", excerpt
            )

        opening = m.end() - 1
        closing = pairs.get(opening)
        if closing is None or closing >= end:
            raise MalformedEvalDescriptor("unbalanced parentheses in eval descriptor", excerpt)

        rest = descriptor[closing + 1:end]
        if not rest:
            outer = None
        elif rest.startswith(_OUTER_SEPARATOR):
            outer = rest[len(_OUTER_SEPARATOR):]
        else:
            raise MalformedEvalDescriptor("unexpected text after eval descriptor", excerpt)
        levels.append((name, outer))

        name = m.group(1)
        start, end = opening + 1, closing
        if not _EVAL_HEAD.match(descriptor, start, end):
            break

    node = _base_evaluator(name, descriptor[start:end], excerpt)
    for level_name, outer in reversed(levels):
        node = _frame(level_name, outer, node, excerpt)
    return node
