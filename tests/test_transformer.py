import dataclasses

import pytest

from compiler.dsl import Parser, Tokenizer, Transformer, UnsupportedNode
from compiler.dsl import ast_nodes as source
from compiler.dsl import target_nodes as target
from compiler.dsl.traverser import traverse


def transform(text):
    return Transformer().transform(Parser(Tokenizer(text).generate_tokens()).parse())


def test_top_level_call_is_wrapped_in_statement():
    assert transform("(add 2 3)") == target.Program((
        target.ExpressionStatement(
            target.CallExpression(
                target.Identifier("add"),
                (target.NumberLiteral("2"), target.NumberLiteral("3")),
            )
        ),
    ))


def test_nested_call_becomes_plain_argument():
    program = transform("(add 2 (subtract 4 2))")
    statement = program.body[0]
    inner = statement.expression.arguments[1]
    assert isinstance(inner, target.CallExpression)
    assert inner.callee == target.Identifier("subtract")


def test_top_level_number_is_not_wrapped():
    assert transform("2") == target.Program((target.NumberLiteral("2"),))


def test_mixed_top_level_forms_keep_order():
    body = transform("(add 1 2) 3 (neg 4)").body
    assert [type(entry) for entry in body] == [
        target.ExpressionStatement, target.NumberLiteral, target.ExpressionStatement,
    ]


def test_output_is_immutable():
    program = transform("(add 1 2)")
    assert isinstance(program.body, tuple)
    assert isinstance(program.body[0].expression.arguments, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        program.body[0].expression.callee = target.Identifier("sub")


def test_source_ast_is_left_untouched():
    ast = Parser(Tokenizer("(add 1 (mul 2 3))").generate_tokens()).parse()
    before = dataclasses.astuple(ast)
    Transformer().transform(ast)
    assert dataclasses.astuple(ast) == before


def test_traversal_is_pre_order_with_insertion_targets():
    ast = source.Program((
        source.CallExpression("a", (source.NumberLiteral("1"), source.CallExpression("b", ()))),
        source.NumberLiteral("2"),
    ))
    visited = []

    def record(node, parent, insertion_target):
        visited.append((type(node).__name__, insertion_target))
        return type(node).__name__

    traverse(ast, {
        source.Program: record,
        source.CallExpression: record,
        source.NumberLiteral: record,
    })
    assert visited == [
        ("Program", None),
        ("CallExpression", "Program"),
        ("NumberLiteral", "CallExpression"),
        ("CallExpression", "CallExpression"),
        ("NumberLiteral", "Program"),
    ]


def test_traversal_rejects_foreign_nodes():
    with pytest.raises(UnsupportedNode):
        traverse(source.Program(("not a node",)), {})


def test_source_nodes_are_visited_once():
    ast = Parser(Tokenizer("(add 1 (mul 2 3)) 4").generate_tokens()).parse()
    visits = []

    class CountingTransformer(Transformer):
        def call_expression(self, node, parent, insertion_target):
            visits.append(node.name)
            return super().call_expression(node, parent, insertion_target)

        def number_literal(self, node, parent, insertion_target):
            visits.append(node.value)
            return super().number_literal(node, parent, insertion_target)

    CountingTransformer().transform(ast)
    assert visits == ["add", "1", "mul", "2", "3", "4"]
