"""Marker tokens shared by the frame and eval-descriptor parsers."""
import re
from typing import Tuple

CONSTRUCTOR_MARKER = "new "

# Parenthesised fragments the host prints instead of a source location.
NATIVE_MARKERS = frozenset({"native", "<anonymous>", "unknown location"})
_PROMISE_INDEX = re.compile(r"^index \d+$")  # Promise.all / Promise.any element


def strip_constructor(name: str) -> Tuple[str, bool]:
    """Split a leading ``new `` marker off *name*.

    Returns:
        ``(name_without_marker, is_constructor)``. The stripped name may be
        empty for anonymous construction calls.
    """
    if name.startswith(CONSTRUCTOR_MARKER):
        return name[len(CONSTRUCTOR_MARKER):], True
    return name, False


def is_native_marker(fragment: str) -> bool:
    """Return True if *fragment* is a recognised "no source" marker."""
    return fragment in NATIVE_MARKERS or bool(_PROMISE_INDEX.match(fragment))
