"""
Errors raised by the translation stages.

Every error is fatal to the enclosing compile call. Stages never catch
their own errors; callers catch ``CompilerError`` and report it.
"""


class CompilerError(Exception):
    """Base class for all translation failures."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class UnknownCharacter(CompilerError):
    """The tokenizer met a character outside digits, letters, parens and whitespace."""

    def __init__(self, character, position):
        super().__init__(f"Unknown character: {character!r} at position {position}")
        self.character = character
        self.position = position


class UnexpectedToken(CompilerError):
    """The parser met a token (or end of input) the grammar does not allow here."""

    def __init__(self, token, expected=None):
        found = f"token {token.type.name} ({token.value!r})" if token is not None else "end of input"
        message = f"Unexpected {found}"
        if expected:
            message += f", expected {expected}"
        super().__init__(message)
        self.token = token
        self.expected = expected


class UnsupportedNode(CompilerError):
    """A node outside the fixed variant set reached traversal or generation."""

    def __init__(self, node):
        super().__init__(f"Unsupported node type: {type(node).__name__}")
        self.node = node
