"""Validation errors raised before any shanten search starts."""


class MalformedHandError(Exception):
    """Base class for hands that cannot be evaluated.

    `tag` names the failure for callers that report errors as data
    (JSON output, session history) instead of exceptions.
    """
    tag = "MalformedHand"


class MalformedHandSize(MalformedHandError):
    """Total tile count is neither 3k+2 nor the 13-tile waiting hand."""
    tag = "MalformedHandSize"


class InvalidTileCount(MalformedHandError):
    """A tile identity appears more than 4 times across hand and melds."""
    tag = "InvalidTileCount"


class InvalidMeldShape(MalformedHandError):
    """A declared meld is not a sequence, triplet or quad."""
    tag = "InvalidMeldShape"


class NotationError(MalformedHandError):
    """Tile notation could not be parsed."""
    tag = "InvalidNotation"
