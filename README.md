# regextok

`regextok` turns patterns written in a small regular-expression dialect into
a list of tokens and a flat list of syntax nodes carrying repetition bounds.
It is the front end of a regex engine.

## Supported syntax

| Syntax           | Meaning                                        |
|------------------|------------------------------------------------|
| `a`              | a literal character                            |
| `.`              | any character                                  |
| `*`              | zero or more of the preceding item             |
| `+`              | one or more of the preceding item              |
| `[abc]`          | a character class                              |
| `[a-z]`          | a range inside a character class              |
| `\d`, `\w`       | digit, word character                          |
| `\s`, `\n`, `\t` | space, newline, tab                            |
| `\x`             | any other escaped character is taken literally |

Inside a class, a `-` with nothing literal before it, or directly before the
closing `]`, is a literal dash. A range whose two ends are the same character
becomes a single literal.

`tokenize` raises `InvalidPatternError` (a subclass of `ValueError`) for an
empty class (`[]`), a class that is never closed, a trailing backslash, a
quantifier at the start of the pattern, or two quantifiers in a row.

## Installation

```
pip install .
```

## Usage

```python
from regextok.engine import InvalidPatternError, tokenize, transform_to_ast

tokens = tokenize("[e-]+.*")
ast = transform_to_ast(tokens)

for node in ast:
    print(node)

try:
    tokenize("*abc")
except InvalidPatternError as exc:
    print(exc)
```

### `regextok.engine`

- `tokenize(pattern)` returns a list of tokens.
- `transform_to_ast(tokens)` returns one `AstNode` per non-quantifier token.
  `*` sets the preceding node's bounds to `0..UNBOUNDED`, `+` to
  `1..UNBOUNDED`, where `UNBOUNDED` is `2**31 - 1`.
- `is_syntax_valid(tokens)` returns `False` when a quantifier starts the list
  or follows another quantifier.
- `translate_escaped(char)` returns the token for a backslash followed by
  `char`.

### `regextok.tokens`

`TokenType` enumerates the token kinds. `Token` carries only a type and
offers `is_quantitative()`. `LiteralToken` holds one character in `literal`,
`RangeToken` holds `start` and `end`, and `ClassToken` holds its members in
`tokens`. Tokens compare by value, and `str()` gives a readable description.

### `regextok.astnode`

`AstNode` is a dataclass with `token`, `min_count`, `max_count` (both
defaulting to 1) and unused `left` / `right` links. It keeps its own copy of
the token.

### `regextok.nfa`

`OPCode` (`EPSILON`, `ONCE`, `REPEAT`), the frozen dataclass `Instruction`
(`op`, `rule`, `min_count`, `max_count`; negative bounds raise `ValueError`)
and `NFAState` (`state`, `is_accepting`, `transitions`, with
`add_transition(instruction, targets)` and `clear_transitions()`) are the
data types for an automaton.

## What it does not do

The package does not match text against a pattern. Nothing compiles a list of
`AstNode` objects into `NFAState` objects or runs an automaton, and there is
no command-line program.

## Running the tests

```
pip install .[test]
pytest
```