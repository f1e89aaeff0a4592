"""Parser for a complete error blob.

    TypeError: Cannot read properties of null
        at render (/srv/view.js:42:10)
        at /srv/main.js:7:3
"""
import re

from .errors import MalformedEnvelope
from .eval_descriptor import DEFAULT_MAX_EVAL_DEPTH
from .frame import parse_frame
from .schemas import ErrorEnvelope

# match 1: kind, match 2: message (everything after the first ": ")
_FIRST_LINE = re.compile(r"(.*?)(?:: (.*))?")


def parse_envelope(text: str, *, max_eval_depth: int = DEFAULT_MAX_EVAL_DEPTH) -> ErrorEnvelope:
    """Split *text* into kind, message and frames.

    Blank frame lines are skipped; every other line must be a frame. Text
    without a line break is a first line alone and yields no frames.

    Raises:
        MalformedEnvelope: *text* is not a string, or its first line cannot
            be split into kind and message.
        MalformedFrame: A frame line could not be parsed.
    """
    if not isinstance(text, str):
        raise MalformedEnvelope(f"expected str, got {type(text).__name__}")

    first_line, _, rest = text.partition("\n")
    m = _FIRST_LINE.fullmatch(first_line.rstrip("\r"))
    if not m:
        raise MalformedEnvelope("cannot split error kind from message", first_line)

    frames = tuple(
        parse_frame(line.rstrip("\r"), max_eval_depth=max_eval_depth)
        for line in rest.split("\n")
        if line.strip()
    )
    return ErrorEnvelope(kind=m.group(1), message=m.group(2), frames=frames)
