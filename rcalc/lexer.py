from .errors import LexingError
from .box import SourcePosition, Token

EOF_NAME = "$end"


class Lexer:
    """词法分析器，lex()获取 Token 流"""

    def __init__(self, rules):
        self.rules = rules

    def lex(self, s):
        return LexerStream(self, s)


class LexerStream:
    """
    词法分析器流，按需生成 Token。

    next_token() 消耗一个令牌；peek() 返回下一个令牌但不移动游标。
    输入结束后 next_token() 一直返回 `$end` 令牌，而迭代协议抛出 StopIteration。
    输入只有一行，行号恒为 1。
    """

    def __init__(self, lexer, s):
        self.lexer = lexer  # 词法分析器（包含匹配规则）
        self.s = s          # 输入字符串
        self.idx = 0

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token()
        if token.name == EOF_NAME:
            raise StopIteration
        return token

    def next_token(self):
        if self.idx >= len(self.s):
            return Token(EOF_NAME, "", SourcePosition(self.idx, 1, self.idx + 1))

        for rule in self.lexer.rules:
            match = rule.matches(self.s, self.idx)
            # 空匹配不产生令牌，否则游标无法前进
            if match and match.end > match.start:
                source_pos = SourcePosition(match.start, 1, match.start + 1)
                self.idx = match.end
                return Token(rule.name, self.s[match.start:match.end], source_pos)

        char = self.s[self.idx]
        raise LexingError(
            f"Unrecognized character {char!r} at position {self.idx}",
            SourcePosition(self.idx, 1, self.idx + 1),
            char,
        )

    def peek(self):
        # 保存游标，读取后原样恢复；出错时同样恢复
        idx = self.idx
        try:
            return self.next_token()
        finally:
            self.idx = idx
