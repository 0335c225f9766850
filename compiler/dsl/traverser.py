from .ast_nodes import NumberLiteral, CallExpression, Program
from .errors import UnsupportedNode


def children_of(node):
    if isinstance(node, Program):
        return node.body
    if isinstance(node, CallExpression):
        return node.params
    if isinstance(node, NumberLiteral):
        return ()
    raise UnsupportedNode(node)


def traverse(ast, visitor):
    """
    Walk a source AST in pre-order, calling ``visitor[type(node)]``.

    Callbacks are invoked as ``callback(node, parent, target)`` where
    ``target`` is the insertion target returned by the parent's callback
    (``None`` for the root). Whatever a callback returns becomes the
    insertion target for that node's children; a node without a callback
    passes its own target through unchanged.
    """

    def traverse_node(node, parent, target):
        children = children_of(node)
        method = visitor.get(type(node))
        if method is not None:
            target = method(node, parent, target)
        for child in children:
            traverse_node(child, node, target)

    traverse_node(ast, None, None)
