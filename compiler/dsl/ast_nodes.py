"""Source AST produced by the parser."""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class NumberLiteral:
    value: str


@dataclass(frozen=True)
class CallExpression:
    name: str
    params: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Program:
    body: Tuple["Node", ...] = ()


Node = Union[NumberLiteral, CallExpression]
