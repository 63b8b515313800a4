"""Exceptions raised by the argument parser."""

from __future__ import annotations

__all__ = ["ParserError", "NoMatchingParameterError"]


class ParserError(Exception):
    """An argument could not be parsed for a parameter.

    Reserved: none of the current matching rules raise it. The parser still
    treats it as a "use the default" signal so a stricter rule can be added
    without changing what callers observe.
    """

    @classmethod
    def missing_prefix(cls, argument: str, parameter: str) -> "ParserError":
        """The argument names ``parameter`` but carries neither prefix."""

        return cls(
            f"Argument '{argument}' contains parameter '{parameter}' "
            "but does not have any matching prefix."
        )


class NoMatchingParameterError(ValueError):
    """A value was requested for an id no declared parameter carries."""

    def __init__(self, id: str) -> None:
        super().__init__("No matching parameter found!")
        self.id = id
