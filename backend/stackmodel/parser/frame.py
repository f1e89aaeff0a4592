"""Parser for single ``    at ...`` frame lines.

Frame bodies come in three shapes, tried in this order:

    at Foo.bar (/srv/app.js:10:5)                       <- named, located
    at Array.map (native)                               <- named, no source
    at eval (eval at run (/srv/app.js:1:1), <anonymous>:2:2)
                                                        <- evaluated code
    at /srv/app.js:3:4                                  <- anonymous frame

The first alternative that matches decides the reading of the fragment.
"""
import logging
import re

from .errors import MalformedEvalDescriptor, MalformedFrame
from .eval_descriptor import DEFAULT_MAX_EVAL_DEPTH, is_eval_descriptor, parse_eval_descriptor
from .location import parse_location
from .markers import is_native_marker, strip_constructor
from .schemas import StackFrame

logger = logging.getLogger(__name__)

# match 1: name or bare location, match 2: location / eval descriptor / marker
_FRAME = re.compile(r"^\s*at\s+(.+?)(?: \((.+)\))?$")


def parse_frame(line: str, *, max_eval_depth: int = DEFAULT_MAX_EVAL_DEPTH) -> StackFrame:
    """Parse one frame line into a :class:`StackFrame`.

    Args:
        line: A line such as ``"    at Foo.bar (/a/b:10:5)"``.
        max_eval_depth: Nesting cap handed to the eval-descriptor parser.

    Raises:
        MalformedFrame: The line lacks the ``at`` marker, or its
            parenthesised part is neither a location, a no-source marker nor
            an eval descriptor.
    """
    m = _FRAME.match(line)
    if not m:
        raise MalformedFrame("not a stack frame line", line)

    body, fragment = m.group(1), m.group(2)

    if fragment is None:
        # Anonymous frame: the whole body is the location
        location = parse_location(body)
        if location is None:
            return StackFrame(is_native=True)
        return StackFrame(file=location.file, line=location.line, column=location.column)

    name, is_constructor = strip_constructor(body)

    location = parse_location(fragment)
    if location is not None:
        return StackFrame(
            name=name,
            file=location.file,
            line=location.line,
            column=location.column,
            is_constructor=is_constructor,
        )

    if is_native_marker(fragment):
        return StackFrame(name=name, is_constructor=is_constructor, is_native=True)

    if is_eval_descriptor(fragment):
        try:
            return parse_eval_descriptor(body, fragment, max_depth=max_eval_depth)
        except MalformedEvalDescriptor as exc:
            logger.warning("Keeping only the name of frame %r: %s", name, exc)
            return StackFrame(name=name, is_constructor=is_constructor)

    raise MalformedFrame("unrecognised frame location", line)
