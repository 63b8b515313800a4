"""Declarations describing the arguments a :class:`~liteargs.parser.Parser` resolves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

__all__ = ["ArgumentType", "Parameter"]


class ArgumentType(Enum):
    """The value types a parameter can resolve to."""

    STRING = "string"
    INT = "int"


@dataclass(frozen=True, slots=True)
class Parameter:
    """One recognised command-line parameter.

    ``name`` and ``short_name`` are matched against the raw arguments without
    their prefixes (``version`` for ``--version=...``, ``v`` for ``-v ...``).
    ``default_value`` is returned whenever the parameter is missing from the
    arguments or its value cannot be converted to ``type``. ``id`` is the key
    the resolved value is looked up by and should be unique within a parser.
    """

    name: str
    short_name: str
    type: ArgumentType
    default_value: Union[str, int]
    id: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Parameter name must not be empty.")
        if self.type is ArgumentType.INT:
            valid = isinstance(self.default_value, int) and not isinstance(self.default_value, bool)
        else:
            valid = isinstance(self.default_value, str)
        if not valid:
            raise TypeError(
                f"Default value {self.default_value!r} of parameter '{self.name}' "
                f"does not match type {self.type.name}."
            )

    @classmethod
    def string(
        cls, name: str, short_name: str, default_value: str, id: Optional[str] = None
    ) -> "Parameter":
        return cls(name, short_name, ArgumentType.STRING, default_value, id or name)

    @classmethod
    def integer(
        cls, name: str, short_name: str, default_value: int, id: Optional[str] = None
    ) -> "Parameter":
        return cls(name, short_name, ArgumentType.INT, default_value, id or name)
