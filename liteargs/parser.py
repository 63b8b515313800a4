"""Resolve declared parameters from a raw argument list.

The parser scans every argument once per parameter when it is constructed and
keeps the resolved values; later lookups by parameter id never fail for a
declared parameter. Two argument shapes are recognised:

* long form, ``--name=value``: everything after the first separator is the
  value, so ``--opt=a=b`` yields ``a=b``;
* short form, ``-n value...``: the following arguments up to the next
  prefixed one are joined with single spaces.

When a parameter occurs several times the last occurrence wins. Missing
parameters and integers that fail to convert resolve to the declared default.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Union

from .config import (
    DEFAULT_PREFIX,
    DEFAULT_SECONDARY_PREFIX,
    DEFAULT_VALUE_SEPARATOR,
    TokenConfig,
)
from .errors import NoMatchingParameterError, ParserError
from .parameter import ArgumentType, Parameter

__all__ = ["Parser"]

_LOGGER = logging.getLogger("liteargs.parser")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class Parser:
    """Parse ``arguments`` for ``parameters`` and serve the values by id."""

    def __init__(
        self,
        arguments: Iterable[str],
        parameters: Iterable[Parameter],
        *,
        argument_prefix: str = DEFAULT_PREFIX,
        argument_value_separator: str = DEFAULT_VALUE_SEPARATOR,
        argument_secondary_prefix: str = DEFAULT_SECONDARY_PREFIX,
    ) -> None:
        self.arguments: tuple[str, ...] = tuple(arguments)
        self.parameters: tuple[Parameter, ...] = tuple(parameters)
        self.argument_prefix = argument_prefix
        self.argument_value_separator = argument_value_separator
        self.argument_secondary_prefix = argument_secondary_prefix

        self._str_values: Dict[str, str] = {}
        self._int_values: Dict[str, int] = {}

        for parameter in self.parameters:
            if parameter.type is ArgumentType.STRING:
                try:
                    value = self._parse_string_argument(parameter)
                except ParserError as exc:
                    _LOGGER.debug("Using default for %s: %s", parameter.id, exc)
                    value = str(parameter.default_value)
                self._str_values.setdefault(parameter.id, value)
            elif parameter.type is ArgumentType.INT:
                self._int_values.setdefault(parameter.id, self._parse_int_argument(parameter))

    @classmethod
    def from_config(
        cls,
        arguments: Iterable[str],
        parameters: Iterable[Parameter],
        config: TokenConfig,
    ) -> "Parser":
        return cls(
            arguments,
            parameters,
            argument_prefix=config.prefix,
            argument_value_separator=config.value_separator,
            argument_secondary_prefix=config.secondary_prefix,
        )

    def get_string_argument_value(self, id: str) -> str:
        """Return the resolved string value of the parameter ``id``."""

        value = self._str_values.get(id)
        if value is not None:
            return value
        return self._declared_default(id, str)

    def get_int_argument_value(self, id: str) -> int:
        """Return the resolved integer value of the parameter ``id``."""

        value = self._int_values.get(id)
        if value is not None:
            return value
        return self._declared_default(id, int)

    def resolved(self) -> Dict[str, Union[str, int]]:
        """Return every resolved value keyed by id, in declaration order."""

        values: Dict[str, Union[str, int]] = {}
        for parameter in self.parameters:
            if parameter.id in values:
                continue
            if parameter.type is ArgumentType.INT:
                values[parameter.id] = self.get_int_argument_value(parameter.id)
            else:
                values[parameter.id] = self.get_string_argument_value(parameter.id)
        return values

    def _parse_string_argument(self, parameter: Parameter) -> str:
        value = str(parameter.default_value)
        matched = False

        for index, argument in enumerate(self.arguments):
            if self._is_long_form(argument, parameter):
                value = argument.split(self.argument_value_separator, 1)[1]
                matched = True
            elif argument.startswith(self.argument_secondary_prefix) and argument.endswith(
                parameter.short_name
            ):
                value = " ".join(self._trailing_values(index + 1))
                matched = True

        if not matched:
            _LOGGER.debug("No argument for %s, using default %r", parameter.id, value)
        return value

    def _parse_int_argument(self, parameter: Parameter) -> int:
        try:
            text = self._parse_string_argument(parameter)
        except ParserError as exc:
            _LOGGER.debug("Using default for %s: %s", parameter.id, exc)
            return int(parameter.default_value)
        text = text.replace(" ", "")
        if not _INT_PATTERN.fullmatch(text):
            _LOGGER.debug(
                "Value %r for %s is not an integer, using default %r",
                text,
                parameter.id,
                parameter.default_value,
            )
            return int(parameter.default_value)
        return int(text)

    def _is_long_form(self, argument: str, parameter: Parameter) -> bool:
        if not argument.startswith(self.argument_prefix) or not self.argument_value_separator:
            return False
        remainder = argument[len(self.argument_prefix):]
        name, separator, _ = remainder.partition(self.argument_value_separator)
        return bool(separator) and name == parameter.name

    def _trailing_values(self, start: int) -> List[str]:
        collected: List[str] = []
        for argument in self.arguments[start:]:
            if argument.startswith(self.argument_prefix) or argument.startswith(
                self.argument_secondary_prefix
            ):
                break
            collected.append(argument)
        return collected

    def _declared_default(self, id: str, expected: type) -> Any:
        parameter = self._get_parameter_by_id(id)
        if not isinstance(parameter.default_value, expected):
            raise TypeError(
                f"Parameter '{id}' is declared as {parameter.type.name}, "
                f"not {expected.__name__}."
            )
        return parameter.default_value

    def _get_parameter_by_id(self, id: str) -> Parameter:
        for parameter in self.parameters:
            if parameter.id == id:
                return parameter
        raise NoMatchingParameterError(id)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(arguments={list(self.arguments)!r}, "
            f"parameters={[p.id for p in self.parameters]!r})"
        )
