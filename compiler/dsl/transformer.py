from . import ast_nodes as source
from . import target_nodes as target
from .errors import UnsupportedNode
from .traverser import traverse


class _PendingCall:
    """A target call whose arguments are still being collected."""

    def __init__(self, name):
        self.name = name
        self.arguments = []


class _PendingStatement:
    def __init__(self, call):
        self.call = call


class Transformer:
    """Turns a source ``Program`` into a target ``Program`` in a single pass."""

    def transform(self, ast):
        body = []
        traverse(ast, {
            source.Program: lambda node, parent, insertion_target: body,
            source.CallExpression: self.call_expression,
            source.NumberLiteral: self.number_literal,
        })
        return target.Program(tuple(self.freeze(entry) for entry in body))

    def number_literal(self, node, parent, insertion_target):
        insertion_target.append(target.NumberLiteral(node.value))

    def call_expression(self, node, parent, insertion_target):
        call = _PendingCall(node.name)
        if isinstance(parent, source.CallExpression):
            insertion_target.append(call)
        else:
            insertion_target.append(_PendingStatement(call))
        return call.arguments

    def freeze(self, entry):
        """Convert pending output into frozen target nodes; walks the output tree, not the source."""
        if isinstance(entry, _PendingStatement):
            return target.ExpressionStatement(self.freeze(entry.call))
        if isinstance(entry, _PendingCall):
            return target.CallExpression(
                target.Identifier(entry.name),
                tuple(self.freeze(argument) for argument in entry.arguments),
            )
        if isinstance(entry, target.NumberLiteral):
            return entry
        raise UnsupportedNode(entry)
