"""
Orchestration of the four translation stages.
"""
import logging
from dataclasses import dataclass
from typing import List

from .tokens import Token
from .tokenizer import Tokenizer
from .parser import Parser
from .transformer import Transformer
from .generator import CodeGenerator
from . import ast_nodes, target_nodes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Compilation:
    """Every artifact of one successful translation."""

    source: str
    tokens: List[Token]
    ast: ast_nodes.Program
    target_ast: target_nodes.Program
    output: str


def compile_steps(source: str) -> Compilation:
    """
    Translate ``source`` and keep the intermediate artifacts.

    Any stage error propagates unchanged; there is no partial result.
    """
    tokens = Tokenizer(source).generate_tokens()
    logger.debug(f"Tokenized {len(source)} characters into {len(tokens)} tokens")

    ast = Parser(tokens).parse()
    logger.debug(f"Parsed {len(ast.body)} top-level expressions")

    target_ast = Transformer().transform(ast)
    logger.debug(f"Transformed into {len(target_ast.body)} target entries")

    output = CodeGenerator().generate(target_ast)
    logger.debug(f"Generated {len(output)} characters of output")
    return Compilation(source, tokens, ast, target_ast, output)


def compile(source: str) -> str:
    """Translate an S-expression program into C-style call syntax."""
    return compile_steps(source).output
