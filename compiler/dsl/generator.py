from .target_nodes import Program, Identifier, NumberLiteral, ExpressionStatement, CallExpression
from .errors import UnsupportedNode

STATEMENT_TERMINATOR = ';'


class CodeGenerator:
    def generate(self, node):
        if isinstance(node, Program):
            return '\n'.join(self.generate(entry) for entry in node.body)

        if isinstance(node, Identifier):
            return node.name

        if isinstance(node, NumberLiteral):
            return node.value

        if isinstance(node, ExpressionStatement):
            return self.generate(node.expression) + STATEMENT_TERMINATOR

        if isinstance(node, CallExpression):
            arguments = ', '.join(self.generate(argument) for argument in node.arguments)
            return f"{self.generate(node.callee)}({arguments})"

        raise UnsupportedNode(node)
