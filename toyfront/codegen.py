"""Generation of IR text for whole programs."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Union

from .ast import Program
from .emit import EmitContext, FunctionBuilder, IrEmitter

_FUNCTION_NAME = "u0:0"


class Codegen:
    """Accumulates the IR of each generated program."""

    def __init__(self) -> None:
        self._ir = ""

    @property
    def ir(self) -> str:
        """All IR generated so far."""
        return self._ir

    def gen(self, program: Program) -> None:
        """Lower *program* into one function and append its IR."""
        builder = FunctionBuilder(_FUNCTION_NAME)
        program.accept(IrEmitter(EmitContext(builder)))
        self._ir += builder.render() + "\n"

    def write(self, path: Union[str, PathLike]) -> None:
        """Write the accumulated IR to *path*, replacing its contents."""
        Path(path).write_text(self._ir, encoding="utf-8")