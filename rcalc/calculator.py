from .lexergenerator import default_lexer
from .parsergenerator import ParserGenerator
from .interpreter import Interpreter

_lexer = default_lexer()
_parser = ParserGenerator().build()
_interpreter = Interpreter()


def parse(source):
    """用默认的词法分析器和优先级表解析表达式，返回语法树"""
    return _parser.parse(_lexer.lex(source))


def calculate(source):
    """
    解析并求值表达式。

    >>> calculate("3+4*2")
    11

    :raises LexingError: 出现无法识别的字符。
    :raises ParsingError: 缺少操作数或表达式后有多余的令牌。
    :raises DivisionByZeroError: 除数为 0。
    """
    return _interpreter.evaluate(parse(source))
