from __future__ import annotations

import dataclasses

import pytest

from liteargs import ArgumentType, Parameter


def test_string_constructor_defaults_id_to_name() -> None:
    param = Parameter.string("file", "f", "out.txt")
    assert param.type is ArgumentType.STRING
    assert param.id == "file"
    assert param.default_value == "out.txt"


def test_integer_constructor_keeps_explicit_id() -> None:
    param = Parameter.integer("test", "t", 10, id="test10")
    assert param.type is ArgumentType.INT
    assert param.id == "test10"


def test_parameter_is_immutable() -> None:
    param = Parameter.string("file", "f", "out.txt")
    with pytest.raises(dataclasses.FrozenInstanceError):
        param.name = "other"  # type: ignore[misc]


def test_empty_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        Parameter.string("", "f", "x")


@pytest.mark.parametrize(
    "kind, default",
    [
        (ArgumentType.INT, "10"),
        (ArgumentType.INT, True),
        (ArgumentType.STRING, 10),
    ],
)
def test_mismatched_default_is_rejected(kind: ArgumentType, default: object) -> None:
    with pytest.raises(TypeError):
        Parameter("test", "t", kind, default, "test")  # type: ignore[arg-type]
