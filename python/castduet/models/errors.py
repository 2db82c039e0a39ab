"""Errors raised by the position model and the path search."""

from __future__ import annotations


class DuetError(Exception):
    """Base class for every error the solver reports."""


# -- position parsing ---------------------------------------------------------


class PositionError(DuetError, ValueError):
    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


class MalformedPosition(PositionError):
    """The string does not match ``FREE`` or ``[UD](c,r)-(c,r)``."""

    def __init__(self, text: str) -> None:
        super().__init__(text, "Malformed position")


class InvalidGeometry(PositionError):
    """Peg and ring cells are not a king's move apart."""

    def __init__(self, text: str) -> None:
        super().__init__(text, "Peg and ring cells are not adjacent")


# -- search -------------------------------------------------------------------


class SearchError(DuetError):
    pass


class UnknownNode(SearchError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Position {name!r} is not part of the move graph.")
        self.name = name


class NotReachable(SearchError):
    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"{target!r} cannot be reached from {source!r}.")
        self.source = source
        self.target = target
