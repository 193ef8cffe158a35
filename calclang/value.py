import abc
from dataclasses import dataclass
from typing import Callable

from calclang.utils import format_number


class Value(abc.ABC):
    @classmethod
    @abc.abstractmethod
    def type_name(cls) -> str:
        ...


UnaryOperationImpl = Callable[[Value], Value]
BinaryOperationImpl = Callable[[Value, Value], Value]


@dataclass
class Number(Value):
    v: float

    @classmethod
    def type_name(cls) -> str:
        return "number"

    def __str__(self) -> str:
        return format_number(self.v)


@dataclass
class String(Value):
    v: str

    @classmethod
    def type_name(cls) -> str:
        return "string"

    def __str__(self) -> str:
        return f'"{self.v}"'


@dataclass
class Boolean(Value):
    v: bool

    @classmethod
    def type_name(cls) -> str:
        return "boolean"

    def __str__(self) -> str:
        return "true" if self.v else "false"


@dataclass
class Null(Value):
    @classmethod
    def type_name(cls) -> str:
        return "null"

    def __str__(self) -> str:
        return "(null)"
