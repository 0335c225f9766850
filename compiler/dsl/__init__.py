"""
S-expression to C-style call translator.

The pipeline runs four stages: tokenizer, recursive-descent parser,
AST transformer and code generator. It has no Django dependency.
"""

from .tokenizer import Tokenizer
from .parser import Parser
from .transformer import Transformer
from .generator import CodeGenerator
from .errors import CompilerError, UnknownCharacter, UnexpectedToken, UnsupportedNode
from .pipeline import Compilation, compile, compile_steps

__all__ = [
    'Tokenizer', 'Parser', 'Transformer', 'CodeGenerator',
    'CompilerError', 'UnknownCharacter', 'UnexpectedToken', 'UnsupportedNode',
    'Compilation', 'compile', 'compile_steps',
]
