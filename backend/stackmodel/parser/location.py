"""Parser for ``<file>:<line>:<column>`` fragments."""
import re
from typing import NamedTuple, Optional

# Greedy file part anchors line/column on the rightmost two numeric groups.
# An eval descriptor head is never read as a file name.
_LOCATION = re.compile(r"^(?!eval\s+at\s)(.*):(\d+):(\d+)$", re.DOTALL)


class Location(NamedTuple):
    file: str
    line: int
    column: int


def parse_location(fragment: str) -> Optional[Location]:
    """Parse a location fragment.

    Args:
        fragment: Text such as ``/srv/app.js:10:5``.

    Returns:
        A :class:`Location`, or None when the fragment does not end in
        ``:<digits>:<digits>``. None is not an error: callers go on to try
        the other readings of the fragment.
    """
    m = _LOCATION.match(fragment)
    if not m:
        return None
    return Location(m.group(1), int(m.group(2)), int(m.group(3)))
