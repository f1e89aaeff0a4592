"""Render the running interpreter's stack as a host error blob.

The parser consumes V8-style text. This module is the host side for Python:
it walks the frame chain and prints it in that grammar so that errors raised
from Python code get a StackModel like any other host.

    DiagnosableError: boom
        at new ConfigError (/srv/app/errors.py:12:9)
        at load (/srv/app/settings.py:40:15)
        at <module> (eval at run (/srv/app/main.py:8:5), <string>:1:1)

Top-level code run by ``exec`` / ``eval`` (file name ``<string>``) is printed
as an eval descriptor whose origin is the calling frame, nesting when the
caller is itself executed code.
"""
import itertools
import sys
from types import FrameType
from typing import List, Optional

_EVALUATED_FILENAME = "<string>"
_EVALUATED_CODE_NAME = "<module>"
_INTERNAL_PREFIX = "stackmodel."
_INDENT = "    at "


def _walk(start: FrameType) -> List[FrameType]:
    frames = []
    frame: Optional[FrameType] = start
    while frame is not None:
        frames.append(frame)
        frame = frame.f_back
    return frames


def _column(frame: FrameType) -> int:
    """1-based column of the current instruction, 0 when unknown."""
    positions = getattr(frame.f_code, "co_positions", None)
    if positions is None or frame.f_lasti < 0:
        return 0
    position = next(itertools.islice(positions(), frame.f_lasti // 2, None), None)
    if position is None or position[2] is None:
        return 0
    return position[2] + 1


def _callee_name(frame: FrameType) -> str:
    code = frame.f_code
    qualname = getattr(code, "co_qualname", code.co_name)
    if code.co_name == "__init__" and qualname.endswith(".__init__"):
        return "new " + qualname[: -len(".__init__")]
    return qualname


def _position(frame: FrameType) -> str:
    return f"{frame.f_code.co_filename}:{frame.f_lineno or 0}:{_column(frame)}"


def _is_evaluated(frame: FrameType) -> bool:
    code = frame.f_code
    return code.co_filename == _EVALUATED_FILENAME and code.co_name == _EVALUATED_CODE_NAME


def _is_internal(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__") or ""
    return module.startswith(_INTERNAL_PREFIX)


def _describe(frames: List[FrameType], index: int) -> str:
    """Parenthesised call-site text for ``frames[index]``."""
    frame = frames[index]
    if not _is_evaluated(frame) or index + 1 >= len(frames):
        return _position(frame)
    caller = _callee_name(frames[index + 1])
    return f"eval at {caller} ({_describe(frames, index + 1)}), {_position(frame)}"


def _first_line(kind: str, message: Optional[str]) -> str:
    if not message:
        return kind
    return f"{kind}: {' '.join(str(message).splitlines())}"


def format_host_stack(
    kind: str,
    message: Optional[str] = None,
    *,
    start: Optional[FrameType] = None,
    limit: Optional[int] = None,
    skip_internal: bool = True,
) -> str:
    """Render the current stack as ``Kind: message`` plus one line per frame.

    Args:
        kind: Error kind for the first line.
        message: Optional message; line breaks are folded into spaces.
        start: Innermost frame to render. Defaults to the caller.
        limit: Maximum number of frame lines; None renders every frame.
            ``sys.tracebacklimit`` is not consulted.
        skip_internal: Drop innermost frames that belong to this package.
    """
    if start is None:
        start = sys._getframe(1)
    frames = _walk(start)

    first = 0
    if skip_internal:
        while first < len(frames) and _is_internal(frames[first]):
            first += 1

    indices = range(first, len(frames))
    if limit is not None:
        indices = indices[:limit]

    lines = [_first_line(kind, message)]
    for index in indices:
        lines.append(f"{_INDENT}{_callee_name(frames[index])} ({_describe(frames, index)})")
    return "\n".join(lines)
