from .errors import (LexingError, ParsingError, ParserGeneratorError, ParserGeneratorWarning,
                     EvaluationError, DivisionByZeroError)
from .lexergenerator import LexerGenerator, default_lexer
from .parsergenerator import ParserGenerator
from .interpreter import Interpreter
from .nodes import Number, BinaryOp
from .box import Token, SourcePosition
from .calculator import parse, calculate

__version__ = '0.1.0'

__all__ = [
    "LexerGenerator", "LexingError", "default_lexer",
    "ParserGenerator", "ParsingError",
    "ParserGeneratorError", "ParserGeneratorWarning",
    "Interpreter", "EvaluationError", "DivisionByZeroError",
    "Number", "BinaryOp", "Token", "SourcePosition",
    "parse", "calculate",
]
