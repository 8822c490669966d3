"""Lowering of the syntax tree to textual SSA IR, one function per program."""

from __future__ import annotations

import platform
import sys
from typing import Optional

from .ast import (
    BinaryOperation,
    Expression,
    Integer,
    Operator,
    PrintStatement,
    Program,
    Statement,
    Variable,
    VarStatement,
    Visitor,
)

_BINARY_OPCODES = frozenset({"iadd", "isub", "imul", "sdiv"})

_OPCODES = {
    Operator.ADD: "iadd",
    Operator.SUB: "isub",
    Operator.MUL: "imul",
    Operator.DIV: "sdiv",
}


def _host_call_conv() -> str:
    if sys.platform == "win32":
        return "windows_fastcall"
    if sys.platform == "darwin" and platform.machine().lower() in {"arm64", "aarch64"}:
        return "apple_aarch64"
    return "system_v"


def _write_hex(value: int) -> str:
    value &= 0xFFFF_FFFF_FFFF_FFFF
    pos = (value.bit_length() - 1) & 0xF0
    parts = [f"0x{(value >> pos) & 0xFFFF:04x}"]
    while pos > 0:
        pos -= 16
        parts.append(f"_{(value >> pos) & 0xFFFF:04x}")
    return "".join(parts)


def _format_imm(value: int) -> str:
    """Format a 64-bit immediate: decimal when small, grouped hex otherwise."""
    if value < -10_000:
        return "-" + _write_hex(-value)
    if value <= 10_000:
        return str(value)
    return _write_hex(value)


class FunctionBuilder:
    """Build the body of one function as SSA instructions over i64 values.

    Blocks, values and variables are plain integers; variables must be
    declared before they are defined or used.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.call_conv = _host_call_conv()
        self._layout: dict[int, list[str]] = {}
        self._block_count = 0
        self._current: Optional[int] = None
        self._filled: set[int] = set()
        self._value_count = 0
        self._declared: set[int] = set()
        self._definitions: dict[int, int] = {}

    def create_block(self) -> int:
        """Create a new, empty block and return it."""
        block = self._block_count
        self._block_count += 1
        return block

    def switch_to_block(self, block: int) -> None:
        """Make *block* the block new instructions are appended to."""
        if not 0 <= block < self._block_count:
            raise ValueError(f"block{block} does not exist")
        self._current = block

    def _insert(self, text: str) -> None:
        if self._current is None:
            raise RuntimeError("no current block to insert instructions into")
        if self._current in self._filled:
            raise RuntimeError(f"block{self._current} is already terminated")
        self._layout.setdefault(self._current, []).append(text)

    def _new_value(self) -> int:
        value = self._value_count
        self._value_count += 1
        return value

    def _check_value(self, value: int) -> None:
        if not 0 <= value < self._value_count:
            raise ValueError(f"v{value} does not exist")

    def iconst(self, value: int) -> int:
        """Append an i64 constant and return its value."""
        if self._current is None:
            raise RuntimeError("no current block to insert instructions into")
        result = self._value_count
        self._insert(f"v{result} = iconst.i64 {_format_imm(value)}")
        return self._new_value()

    def binary(self, opcode: str, lhs: int, rhs: int) -> int:
        """Append a binary integer instruction and return its result."""
        if opcode not in _BINARY_OPCODES:
            raise ValueError(f"unknown binary opcode: {opcode}")
        self._check_value(lhs)
        self._check_value(rhs)
        result = self._value_count
        self._insert(f"v{result} = {opcode} v{lhs}, v{rhs}")
        return self._new_value()

    def declare_var(self, var: int) -> None:
        """Declare *var* as an i64 variable."""
        if var in self._declared:
            raise ValueError(f"variable {var} is declared twice")
        self._declared.add(var)

    def def_var(self, var: int, value: int) -> None:
        """Bind *var* to *value* from this point on."""
        if var not in self._declared:
            raise ValueError(f"variable {var} has not been declared")
        self._check_value(value)
        self._definitions[var] = value

    def use_var(self, var: int) -> int:
        """Return the value currently bound to *var*."""
        if var not in self._declared:
            raise ValueError(f"variable {var} has not been declared")
        try:
            return self._definitions[var]
        except KeyError:
            raise ValueError(f"variable {var} is used before it is defined") from None

    def return_(self) -> None:
        """Terminate the current block with a return of no values."""
        self._insert("return")
        assert self._current is not None
        self._filled.add(self._current)

    def render(self) -> str:
        """Return the function as IR text."""
        lines = [f"function {self.name}() {self.call_conv} {{"]
        for position, (block, instructions) in enumerate(self._layout.items()):
            if position:
                lines.append("")
            lines.append(f"block{block}:")
            lines.extend(f"    {text}" for text in instructions)
        lines.append("}")
        return "\n".join(lines) + "\n"


class EmitContext:
    """State shared while lowering one program: the builder and its variables."""

    def __init__(self, builder: FunctionBuilder) -> None:
        self.builder = builder
        self.functions: dict[str, int] = {}
        self.variables: dict[str, int] = {}
        self.index = 0

    def declare_var(self, name: str) -> int:
        """Allocate a fresh variable for *name*, shadowing any earlier one."""
        var = self.index
        self.index += 1
        self.variables[name] = var
        return var

    def get_variable(self, name: str) -> Optional[int]:
        return self.variables.get(name)


class IrEmitter(Visitor[int]):
    """Visitor that lowers a program into its context's builder."""

    def __init__(self, ctx: EmitContext) -> None:
        self.ctx = ctx

    def visit_program(self, program: Program) -> int:
        builder = self.ctx.builder
        entry = builder.create_block()
        builder.switch_to_block(entry)
        for stmt in program:
            stmt.accept(self)
        builder.return_()
        return 0

    def visit_statement(self, stmt: Statement) -> int:
        return stmt.accept(self)

    def visit_var_statement(self, stmt: VarStatement) -> int:
        value = stmt.value.accept(self)
        var = self.ctx.declare_var(stmt.name)
        self.ctx.builder.declare_var(var)
        self.ctx.builder.def_var(var, value)
        return value

    def visit_print_statement(self, stmt: PrintStatement) -> int:
        return stmt.value.accept(self)

    def visit_expression(self, expr: Expression) -> int:
        if isinstance(expr, Integer):
            return self.ctx.builder.iconst(expr.value)
        if isinstance(expr, Variable):
            var = self.ctx.get_variable(expr.name)
            if var is None:
                raise NameError(f"Undefined variable: {expr.name}")
            return self.ctx.builder.use_var(var)
        if isinstance(expr, BinaryOperation):
            lhs = expr.lhs.accept(self)
            rhs = expr.rhs.accept(self)
            return self.ctx.builder.binary(_OPCODES[expr.operator], lhs, rhs)
        raise TypeError(f"not an expression: {expr!r}")