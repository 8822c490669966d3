import pytest

from toyfront.ast import Integer, PrintStatement, Program, Variable, VarStatement
from toyfront.emit import EmitContext, FunctionBuilder, IrEmitter
from toyfront.parser import parse


def _emit(source):
    builder = FunctionBuilder("u0:0")
    builder.call_conv = "system_v"
    ctx = EmitContext(builder)
    result = parse(source).accept(IrEmitter(ctx))
    return builder, ctx, result


def _open_builder():
    builder = FunctionBuilder("f")
    builder.switch_to_block(builder.create_block())
    return builder


def test_worked_example():
    builder, _, _ = _emit("var x = 42; print(x + 1);")
    assert builder.render() == (
        "function u0:0() system_v {\n"
        "block0:\n"
        "    v0 = iconst.i64 42\n"
        "    v1 = iconst.i64 1\n"
        "    v2 = iadd v0, v1\n"
        "    return\n"
        "}\n"
    )


def test_visit_program_returns_first_value():
    _, _, result = _emit("print(3);")
    assert result == 0


@pytest.mark.parametrize(
    "symbol, opcode", [("+", "iadd"), ("-", "isub"), ("*", "imul"), ("/", "sdiv")]
)
def test_operators_lower_to_opcodes(symbol, opcode):
    builder, _, _ = _emit(f"print(3 {symbol} 4);")
    assert f"    v2 = {opcode} v0, v1\n" in builder.render()


def test_last_instruction_is_return():
    builder, _, _ = _emit("var a = 2; var b = a * 3; print(b);")
    lines = builder.render().splitlines()
    assert lines[-2] == "    return"
    assert lines[-1] == "}"


def test_values_are_numbered_in_order():
    builder = _open_builder()
    first = builder.iconst(5)
    second = builder.iconst(6)
    assert second == first + 1


def test_small_constant_is_decimal():
    builder = _open_builder()
    builder.iconst(10000)
    assert "v0 = iconst.i64 10000\n" in builder.render()


def test_large_constant_is_grouped_hex():
    builder = _open_builder()
    builder.iconst(100000)
    assert "v0 = iconst.i64 0x0001_86a0\n" in builder.render()


def test_instruction_outside_block_fails():
    builder = FunctionBuilder("f")
    with pytest.raises(RuntimeError):
        builder.iconst(1)


def test_instruction_after_return_fails():
    builder = _open_builder()
    builder.return_()
    with pytest.raises(RuntimeError):
        builder.iconst(1)


def test_switch_to_unknown_block_fails():
    builder = FunctionBuilder("f")
    with pytest.raises(ValueError):
        builder.switch_to_block(0)


def test_def_use_round_trip():
    builder = _open_builder()
    value = builder.iconst(8)
    builder.declare_var(0)
    builder.def_var(0, value)
    assert builder.use_var(0) == value


def test_variable_errors():
    builder = _open_builder()
    value = builder.iconst(8)
    with pytest.raises(ValueError):
        builder.use_var(3)
    with pytest.raises(ValueError):
        builder.def_var(3, value)
    builder.declare_var(3)
    with pytest.raises(ValueError):
        builder.declare_var(3)
    with pytest.raises(ValueError):
        builder.use_var(3)


def test_binary_rejects_bad_input():
    builder = _open_builder()
    value = builder.iconst(1)
    with pytest.raises(ValueError):
        builder.binary("frobnicate", value, value)
    with pytest.raises(ValueError):
        builder.binary("iadd", value, value + 5)


def test_emit_context_variables():
    ctx = EmitContext(FunctionBuilder("f"))
    a = ctx.declare_var("a")
    b = ctx.declare_var("b")
    assert a != b
    assert ctx.get_variable("a") == a
    assert ctx.get_variable("b") == b
    assert ctx.get_variable("c") is None


def test_redeclared_name_is_rebound():
    ctx = EmitContext(FunctionBuilder("f"))
    first = ctx.declare_var("x")
    second = ctx.declare_var("x")
    assert second != first
    assert ctx.get_variable("x") == second


def test_undefined_variable_raises():
    with pytest.raises(NameError, match="Undefined variable: y"):
        _emit("print(y);")


def test_var_statement_binds_its_value():
    builder = _open_builder()
    ctx = EmitContext(builder)
    emitter = IrEmitter(ctx)
    value = emitter.visit_var_statement(VarStatement("x", Integer(9)))
    assert builder.use_var(ctx.get_variable("x")) == value
    assert emitter.visit_expression(Variable("x")) == value


def test_visit_statement_dispatches():
    builder = _open_builder()
    emitter = IrEmitter(EmitContext(builder))
    value = emitter.visit_statement(PrintStatement(Integer(9)))
    assert f"v{value} = iconst.i64 9" in builder.render()


def test_empty_program_only_returns():
    builder = FunctionBuilder("f")
    IrEmitter(EmitContext(builder)).visit_program(Program())
    assert builder.render().splitlines()[1:-1] == ["block0:", "    return"]