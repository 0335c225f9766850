import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from compiler.dsl import (
    CompilerError, UnexpectedToken, UnknownCharacter, compile, compile_steps,
)
from compiler.dsl.tokens import TokenType


@pytest.mark.parametrize("text, expected", [
    ("(add 2 3)", "add(2, 3);"),
    ("(add 2 (subtract 4 2))", "add(2, subtract(4, 2));"),
    ("(multiply (add 1 2) (subtract 5 3))", "multiply(add(1, 2), subtract(5, 3));"),
    ("(divide (add 10 5) (subtract 8 3))", "divide(add(10, 5), subtract(8, 3));"),
    ("2", "2"),
    ("(add 1 2) 3", "add(1, 2);\n3"),
    ("  (Max 007\n  1)  ", "Max(007, 1);"),
    ("", ""),
])
def test_compile(text, expected):
    assert compile(text) == expected


def test_unbalanced_input():
    with pytest.raises(UnexpectedToken):
        compile("(add 1 2")


def test_unknown_character():
    with pytest.raises(UnknownCharacter) as excinfo:
        compile("(add 1 2%)")
    assert excinfo.value.character == "%"


def test_errors_share_a_base_class():
    for text in ["(add 1 2", "(add 1 2%)", ")"]:
        with pytest.raises(CompilerError):
            compile(text)


def test_nesting_depth_and_argument_order_are_preserved():
    text = "(a 1 (b 2 (c 3 4 5) 6) 7)"
    assert compile(text) == "a(1, b(2, c(3, 4, 5), 6), 7);"


def test_compile_steps_exposes_artifacts():
    compilation = compile_steps("(add 2 3)")
    assert compilation.output == "add(2, 3);"
    assert [token.type for token in compilation.tokens] == [
        TokenType.LPAREN, TokenType.NAME, TokenType.NUMBER, TokenType.NUMBER, TokenType.RPAREN,
    ]
    assert compilation.ast.body[0].name == "add"
    assert compilation.target_ast.body[0].expression.callee.name == "add"


def test_concurrent_calls_are_independent():
    sources = [f"(f{'x' * i} {i})" for i in range(50)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(compile, sources))
    assert results == [f"f{'x' * i}({i});" for i in range(50)]


def test_every_stage_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="compiler.dsl.pipeline"):
        compile("(add 2 3)")
    messages = [record.getMessage() for record in caplog.records]
    for prefix in ["Tokenized", "Parsed", "Transformed", "Generated"]:
        assert any(message.startswith(prefix) for message in messages)
