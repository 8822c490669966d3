# toyfront

`toyfront` is a small compiler front end for **Toy**, a tiny teaching
language. It reads a Toy source file, lexes and parses it into a syntax
tree, and writes the program out as one function in SSA-style intermediate
representation (IR) text. A companion command reports the Toy language for
a project directory.

## The Toy language

A Toy program is a list of statements, each ending in a semicolon:

```
# comments run to the end of the line
var x = 42;
var y = (x + 8) * 2;
print(y / 5 - 1);
```

- `var NAME = EXPR;` binds a variable. Binding the same name again shadows
  the earlier binding.
- `print(EXPR);` evaluates an expression.
- Expressions are integer literals, variable names, parentheses and the
  binary operators `+`, `-`, `*` and `/`. `*` and `/` bind tighter than
  `+` and `-`; operators of equal precedence group to the left.
- Identifiers start with a letter or underscore, followed by letters,
  digits or underscores. `var` and `print` are keywords.
- Integer literals start with a non-zero digit (so `0` is not a literal)
  and must fit in a signed 64-bit integer. There is no unary minus.
- Spaces, tabs, newlines, form feeds and `#` comments are ignored.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Compiling a file

```
toyfront --input program.toy --output program.clif
```

| Option          | Meaning                                          |
|-----------------|--------------------------------------------------|
| `--input PATH`  | Toy source file to read (required)               |
| `--output PATH` | File the IR text is written to (required)        |
| `--print-ast`   | Also print the parsed syntax tree to standard output |

For the source

```
var x = 42;
print(x + 1);
```

the output file holds

```
function u0:0() system_v {
block0:
    v0 = iconst.i64 42
    v1 = iconst.i64 1
    v2 = iadd v0, v1
    return
}
```

followed by a blank line. The calling convention named after `()` follows
the host: `windows_fastcall` on Windows, `apple_aarch64` on Apple Silicon,
`system_v` elsewhere. Constants up to 10000 in size are written in decimal,
larger ones in hexadecimal grouped by four digits (`0x0001_86a0`).

If the source does not parse, the parser skips each faulty statement up to
and including the next `;` and carries on, so that every syntax error is
found. All of them are then reported on standard error, each as
`Error: <message>`, and the command exits with status 1. An input file that
cannot be read is reported the same way.

A variable used before it is bound is not a syntax error; it is found while
the IR is generated and raises `NameError("Undefined variable: <name>")`.

## Detecting a Toy project

```
toyfront-detect --path samples
```

prints one line of JSON:

```
{"pass":true,"language":"Toy","extension":"toy"}
```

## Using it from Python

```python
from toyfront.codegen import Codegen
from toyfront.error import ParseFailure
from toyfront.parser import parse

source = "var x = 40 + 2;\nprint(x);\n"

try:
    program = parse(source)
except ParseFailure as failure:
    for error in failure.errors:
        print(error.report(source))
    raise

generator = Codegen()
generator.gen(program)
print(generator.ir)
generator.write("out.clif")
```

The modules:

- `toyfront.tokens`: `TokenKind`, `Token`, and `scan(source)`, which yields
  `(start, token_or_error, end)` triples, giving a `LexicalError` where the
  text is not a token.
- `toyfront.lexer`: `Lexer(source)` iterates over `(start, token, end)`
  triples; lexical errors come through as `TokenKind.ERROR` tokens rather
  than stopping the scan.
- `toyfront.parser`: `parse(source)` and `Parser(source).parse_program()`
  return a `Program` or raise `ParseFailure`.
- `toyfront.error`: `ParseError` (a message and optional note, with
  `with_note()` and `report(source)`), `ParseFailure` (holding `errors`),
  and the lexical errors `LexicalError`, `InvalidInteger`, `InvalidToken`.
- `toyfront.ast`: `Program`, `VarStatement`, `PrintStatement`, `Integer`,
  `Variable`, `BinaryOperation`, `Operator`, and the `Visitor` base class.
- `toyfront.emit`: `FunctionBuilder`, `EmitContext` and `IrEmitter`, which
  lower a `Program` into IR text.
- `toyfront.codegen`: `Codegen`, which collects the IR of each program
  passed to `gen()` in `ir` and saves it with `write(path)`.
- `toyfront.cli`: `parse_args`, `run` and `main` behind the `toyfront`
  command.
- `toyfront.detector`: `Detector`, `DetectResult` and `main` behind the
  `toyfront-detect` command.

## What it does not do

- It writes IR text only. It does not assemble, link or produce object
  files or executables, and it does not run programs.
- `print(...)` evaluates its expression in the IR but emits no call that
  would output anything.
- The detector does not look inside the given path: for any path it
  reports the Toy language with the `toy` extension.