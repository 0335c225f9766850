import string

from .errors import UnknownCharacter
from .tokens import Token, TokenType

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)


class Tokenizer:
    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.current = text[0] if text else None

    def advance(self):
        self.pos += 1
        self.current = self.text[self.pos] if self.pos < len(self.text) else None

    def skip_spaces(self):
        while self.current is not None and self.current.isspace():
            self.advance()

    def run(self, charset):
        start = self.pos
        while self.current is not None and self.current in charset:
            self.advance()
        return self.text[start:self.pos]

    def generate_tokens(self):
        tokens = []
        while self.current is not None:
            if self.current.isspace():
                self.skip_spaces()
                continue

            if self.current in DIGITS:
                tokens.append(Token(TokenType.NUMBER, self.run(DIGITS)))
                continue

            if self.current in LETTERS:
                tokens.append(Token(TokenType.NAME, self.run(LETTERS)))
                continue

            if self.current == '(':
                tokens.append(Token(TokenType.LPAREN, '('))
            elif self.current == ')':
                tokens.append(Token(TokenType.RPAREN, ')'))
            else:
                raise UnknownCharacter(self.current, self.pos)

            self.advance()

        return tokens
