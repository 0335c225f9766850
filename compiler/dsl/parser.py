from .tokens import TokenType
from .ast_nodes import NumberLiteral, CallExpression, Program
from .errors import UnexpectedToken

class Parser:
    """Recursive-descent parser. One instance handles a single parse."""

    def __init__(self, tokens):
        self.tokens = tokens
        self.index = 0
        self.current = tokens[0] if tokens else None

    def eat(self, type_):
        if self.current is not None and self.current.type == type_:
            token = self.current
            self.index += 1
            self.current = self.tokens[self.index] if self.index < len(self.tokens) else None
            return token
        raise UnexpectedToken(self.current, expected=type_.name)

    def parse(self):
        body = []
        while self.current is not None:
            body.append(self.expression())
        return Program(tuple(body))

    def expression(self):
        token = self.current

        if token is not None and token.type == TokenType.NUMBER:
            self.eat(TokenType.NUMBER)
            return NumberLiteral(token.value)

        if token is not None and token.type == TokenType.LPAREN:
            return self.call()

        raise UnexpectedToken(token, expected="NUMBER or LPAREN")

    def call(self):
        self.eat(TokenType.LPAREN)
        name = self.eat(TokenType.NAME).value

        params = []
        while True:
            if self.current is None:
                raise UnexpectedToken(None, expected="RPAREN")
            if self.current.type == TokenType.RPAREN:
                break
            params.append(self.expression())
        self.eat(TokenType.RPAREN)
        return CallExpression(name, tuple(params))
