"""Exceptions raised by tour operations."""

from __future__ import annotations


class TourError(Exception):
    """Base class for tour errors."""


class EmptySequenceEdgeError(TourError, ValueError):
    """An edge-based operation was invoked on a sequence with no nodes.

    Callers recover by inserting the point as the first node.
    """


class InvalidHandleError(TourError, KeyError):
    """A handle does not belong to the sequence it was presented to."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
