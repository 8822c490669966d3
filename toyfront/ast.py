"""Syntax tree of the toy language and the visitor interface over it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, Iterator, TypeVar, Union

T = TypeVar("T")


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class Integer:
    value: int

    def accept(self, visitor: Visitor[T]) -> T:
        return visitor.visit_expression(self)


@dataclass(frozen=True)
class Variable:
    name: str

    def accept(self, visitor: Visitor[T]) -> T:
        return visitor.visit_expression(self)


@dataclass(frozen=True)
class BinaryOperation:
    lhs: Expression
    operator: Operator
    rhs: Expression

    def accept(self, visitor: Visitor[T]) -> T:
        return visitor.visit_expression(self)


Expression = Union[Integer, Variable, BinaryOperation]


@dataclass(frozen=True)
class VarStatement:
    name: str
    value: Expression

    def accept(self, visitor: Visitor[T]) -> T:
        return visitor.visit_var_statement(self)


@dataclass(frozen=True)
class PrintStatement:
    value: Expression

    def accept(self, visitor: Visitor[T]) -> T:
        return visitor.visit_print_statement(self)


Statement = Union[VarStatement, PrintStatement]


@dataclass(frozen=True)
class Program:
    statements: tuple[Statement, ...] = ()

    def __init__(self, statements: Iterable[Statement] = ()) -> None:
        object.__setattr__(self, "statements", tuple(statements))

    def accept(self, visitor: Visitor[T]) -> T:
        return visitor.visit_program(self)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)


class Visitor(ABC, Generic[T]):
    """Operations over the syntax tree, one method per kind of node."""

    @abstractmethod
    def visit_program(self, program: Program) -> T: ...

    def visit_statement(self, stmt: Statement) -> T:
        """Dispatch to the method for the statement's own kind."""
        return stmt.accept(self)

    @abstractmethod
    def visit_var_statement(self, stmt: VarStatement) -> T: ...

    @abstractmethod
    def visit_print_statement(self, stmt: PrintStatement) -> T: ...

    @abstractmethod
    def visit_expression(self, expr: Expression) -> T: ...