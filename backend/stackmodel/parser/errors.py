"""Error taxonomy for stack-trace parsing.

Every parser failure derives from :class:`StackParseError`, so StackModel
assembly can turn any of them into the "unavailable" sentinel with a single
``except`` clause.
"""


class StackParseError(ValueError):
    """Base class for all grammar violations found while parsing a trace.

    Attributes:
        text: The fragment that could not be parsed.
    """

    def __init__(self, message: str, text: str = ""):
        self.text = text
        super().__init__(f"{message}: {text!r}" if text else message)


class MalformedEnvelope(StackParseError):
    """The blob cannot be split into a first line and frame lines."""


class MalformedFrame(StackParseError):
    """A frame line matches none of the frame body alternatives."""


class MalformedEvalDescriptor(StackParseError):
    """An ``eval at ...`` descriptor is truncated, unbalanced or too deep."""
