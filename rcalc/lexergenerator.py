import re
from .lexer import Lexer


class Match:
    """封装匹配索引"""

    _attrs_ = ["start", "end"]

    def __init__(self, start, end):
        self.start = start
        self.end = end


class Rule:
    """封装匹配的名称和正则表达式对象"""

    _attrs_ = ['name', 're']

    def __init__(self, name, pattern, flags=0):
        self.name = name
        self.re = re.compile(pattern, flags=flags)

    def matches(self, s, pos):
        """
        从位置pos开始解析字符串s
        :return: 如果规则匹配，则返回一个`Match`对象；如果不匹配，则返回None
        """
        m = self.re.match(s, pos)
        return Match(*m.span(0)) if m is not None else None


class LexerGenerator:
    """
    用于生成词法分析器。

    >>> from rcalc import LexerGenerator
    >>> lg = LexerGenerator()
    >>> lg.add('NUMBER', r'[0-9]')
    >>> lg.add('PLUS', r'\\+')
    >>> lexer = lg.build()
    >>> stream = lexer.lex('1+2')
    >>> stream.next_token()
    Token('NUMBER', '1')
    >>> stream.peek()
    Token('PLUS', '+')
    >>> stream.next_token()
    Token('PLUS', '+')
    >>> stream.next_token()
    Token('NUMBER', '2')
    >>> stream.next_token()
    Token('$end', '')
    """

    def __init__(self):
        self.rules = []

    def add(self, name, pattern, flags=0):
        """添加匹配规则，第一条优先"""
        self.rules.append(Rule(name, pattern, flags=flags))

    def build(self):
        """
        返回一个词法分析器实例，该实例提供一个 `lex` 方法
        该方法必须传递一个字符串，返回一个 `LexerStream`。
        """
        return Lexer(self.rules)


def default_lexer():
    """
    四则运算表达式的词法分析器。

    每条规则只匹配一个字符：数字不会合并，'12' 会得到两个 NUMBER 令牌。
    空白字符不被识别，会引发 LexingError。
    """
    lg = LexerGenerator()
    lg.add('NUMBER', r'[0-9]')
    lg.add('PLUS', r'\+')
    lg.add('MINUS', r'-')
    lg.add('STAR', r'\*')
    lg.add('SLASH', r'/')
    return lg.build()
