"""
Management command to translate an S-expression program to C-style calls.

The source is taken from the positional argument, from --file, or from
stdin when neither is given. --steps also prints the tokens and the
parsed AST.
"""
import json
import sys

from django.core.management.base import BaseCommand, CommandError

from compiler.dsl import CompilerError, compile_steps
from compiler.serializers import ASTNodeSerializer, TokenSerializer


class Command(BaseCommand):
    help = "Translate an S-expression program into C-style function calls"

    def add_arguments(self, parser):
        parser.add_argument("source", nargs="?", help="Program text, e.g. \"(add 2 3)\"")
        parser.add_argument("--file", help="Read the program from this file")
        parser.add_argument("--steps", action="store_true", help="Also print tokens and the AST")

    def handle(self, *args, **options):
        source = self.read_source(options)

        try:
            compilation = compile_steps(source)
        except CompilerError as e:
            raise CommandError(f"{type(e).__name__}: {e.message}")

        if options["steps"]:
            self.stdout.write("Tokens:")
            for token in TokenSerializer(compilation.tokens, many=True).data:
                self.stdout.write(f"  {token['value']} ({token['type']})")
            self.stdout.write("Abstract Syntax Tree:")
            self.stdout.write(json.dumps(ASTNodeSerializer(compilation.ast).data, indent=2))
            self.stdout.write("Output:")

        self.stdout.write(compilation.output)

    def read_source(self, options):
        if options["source"] is not None and options["file"]:
            raise CommandError("Pass either a source argument or --file, not both")
        if options["source"] is not None:
            return options["source"]
        if options["file"]:
            try:
                with open(options["file"], "r", encoding="utf-8") as f:
                    return f.read()
            except OSError as e:
                raise CommandError(f"Cannot read {options['file']}: {e}")
        return sys.stdin.read()
