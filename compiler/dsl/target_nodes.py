"""Target AST produced by the transformer and consumed by the code generator."""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class NumberLiteral:
    value: str


@dataclass(frozen=True)
class CallExpression:
    callee: Identifier
    arguments: Tuple["Expression", ...] = ()


@dataclass(frozen=True)
class ExpressionStatement:
    expression: CallExpression


@dataclass(frozen=True)
class Program:
    body: Tuple[Union[ExpressionStatement, NumberLiteral], ...] = ()


Expression = Union[CallExpression, NumberLiteral]
