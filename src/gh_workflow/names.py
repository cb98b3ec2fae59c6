"""Named string types.

Many workflow fields are "just a string" on the wire but mean different
things: a workflow's name is not its run-name template. Each such field gets
its own `Name` subclass so that the two cannot be swapped by accident:

    class WorkflowName(Name):
        __slots__ = ()

Instances of different subclasses never compare equal and cannot be ordered
against each other, even when they wrap the same text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


@dataclass(frozen=True, slots=True, order=True)
class Name:
    """An immutable, nominally typed wrapper around a single string.

    The wrapped text is stored verbatim: no trimming, case folding or
    character validation happens here.
    """

    value: str

    def __post_init__(self) -> None:
        if type(self) is Name:
            raise TypeError("Name is abstract; declare a subclass per field")
        if not isinstance(self.value, str):
            raise TypeError(
                f"{type(self).__name__} wraps a str, got {type(self.value).__name__}"
            )

    @classmethod
    def new(cls, text: str) -> Self:
        return cls(text)

    @classmethod
    def coerce(cls, value: Self | str) -> Self:
        """Return `value` as this type.

        Instances of this type pass through, plain strings are wrapped.
        Anything else, notably a `Name` of a different type, is rejected.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        raise TypeError(f"Expected {cls.__name__} or str, got {type(value).__name__}")

    def get(self) -> str:
        """Return the wrapped text."""

        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(cls, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.get, return_schema=core_schema.str_schema()
            ),
        )


class WorkflowName(Name):
    """The name of a workflow, as shown in the repository's Actions tab."""

    __slots__ = ()


class WorkflowRunName(Name):
    """The name template for workflow runs (`run-name`).

    May contain expressions such as `${{ github.actor }}`; they are kept as
    plain text.
    """

    __slots__ = ()
